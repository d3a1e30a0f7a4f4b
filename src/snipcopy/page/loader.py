import logging
from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from snipcopy.clipboard.base import ClipboardWriter
from snipcopy.page.document import Document, TEXT_NODE
from snipcopy.page.element import Element

logger = logging.getLogger(__name__)


def _attributes(tag: Tag) -> dict:
    attrs = {}
    for name, value in tag.attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        attrs[name] = value
    return attrs


def _convert(node: Tag, parent: Element) -> None:
    for child in node.children:
        if isinstance(child, PreformattedString):
            continue
        if isinstance(child, NavigableString):
            parent.append_child(Element(TEXT_NODE, text=str(child)))
        elif isinstance(child, Tag):
            element = Element(child.name, _attributes(child))
            parent.append_child(element)
            _convert(child, element)


def load_document(html: str, host_clipboard: Optional[ClipboardWriter] = None) -> Document:
    """Parse rendered HTML into a ``Document``.

    Content found inside ``<head>`` and ``<body>`` is placed in the
    document's head and body; anything else goes into the body.
    """
    soup = BeautifulSoup(html, "html.parser")
    document = Document(host_clipboard=host_clipboard)

    root = soup.find("html") or soup
    head = root.find("head", recursive=False) if root is not soup else soup.find("head")
    body = root.find("body", recursive=False) if root is not soup else soup.find("body")

    if head is not None:
        for name, value in _attributes(head).items():
            document.head.set_attribute(name, value)
        _convert(head, document.head)
        head.extract()

    if body is not None:
        for name, value in _attributes(body).items():
            document.body.set_attribute(name, value)
        _convert(body, document.body)
    else:
        _convert(root, document.body)

    logger.debug(f"Loaded document with {sum(1 for _ in document.iter_elements())} elements")
    return document


def load_document_file(path: Union[str, Path], host_clipboard: Optional[ClipboardWriter] = None) -> Document:
    text = Path(path).read_text(encoding="utf-8")
    return load_document(text, host_clipboard=host_clipboard)
