from typing import Optional

from snipcopy.page.element import Element


class Selection:
    """The document-wide text selection. At most one range at a time."""

    def __init__(self):
        self._node: Optional[Element] = None

    @property
    def anchor_node(self) -> Optional[Element]:
        return self._node

    @property
    def is_collapsed(self) -> bool:
        return self._node is None or self._node.text_content == ""

    def remove_all_ranges(self) -> None:
        self._node = None

    def select_node_contents(self, node: Element) -> None:
        self._node = node

    def to_string(self) -> str:
        if self._node is None:
            return ""
        return self._node.text_content

    def __str__(self) -> str:
        return self.to_string()
