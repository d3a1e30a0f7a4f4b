import logging
from typing import Iterator, List, Optional

from snipcopy.clipboard.base import ClipboardWriter
from snipcopy.page.element import Element
from snipcopy.page.selection import Selection

logger = logging.getLogger(__name__)

TEXT_NODE = "#text"


class Document:
    """A loaded page: an element tree, one selection and a host clipboard.

    ``host_clipboard`` backs ``exec_command("copy")``. Without one, copy
    commands report failure the way a browser without clipboard permission
    does.
    """

    def __init__(self, host_clipboard: Optional[ClipboardWriter] = None):
        self.host_clipboard = host_clipboard
        self.document_element = Element("html")
        self.document_element.owner_document = self
        self.head = self.document_element.append_child(Element("head"))
        self.body = self.document_element.append_child(Element("body"))
        self._selection = Selection()

    def create_element(self, tag: str) -> Element:
        element = Element(tag)
        element.owner_document = self
        return element

    def create_text_node(self, text: str) -> Element:
        return Element(TEXT_NODE, text=text)

    def get_selection(self) -> Selection:
        return self._selection

    @property
    def selection(self) -> Selection:
        return self._selection

    def iter_elements(self) -> Iterator[Element]:
        for element in self.document_element.iter_descendants():
            if element.tag != TEXT_NODE:
                yield element

    def query_selector_all(self, class_name: str) -> List[Element]:
        """Elements carrying ``class_name``, in document order."""
        return [e for e in self.iter_elements() if e.class_list.contains(class_name)]

    def contains(self, element: Element) -> bool:
        node: Optional[Element] = element
        while node is not None:
            if node is self.document_element:
                return True
            node = node.parent
        return False

    def exec_command(self, command: str) -> bool:
        if command != "copy":
            logger.debug(f"Unsupported document command: {command}")
            return False

        if self._selection.anchor_node is None:
            logger.debug("copy command with empty selection")
            return False
        if self.host_clipboard is None:
            logger.debug("copy command without a host clipboard")
            return False

        text = self._selection.to_string()
        return self.host_clipboard.write(text)
