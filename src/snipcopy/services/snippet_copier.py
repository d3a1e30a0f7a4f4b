"""Copy-to-clipboard behaviour for rendered snippet buttons.

``SnippetCopier.initialize`` binds every copy button of a loaded page. A
click decodes the button's base64 payload, writes it to the clipboard and
marks the button ``copied`` until a one-shot timer clears the marker again.
"""

import base64
import logging
import re
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from snipcopy.clipboard.base import ClipboardWriter
from snipcopy.config import Settings
from snipcopy.errors import DecodeError
from snipcopy.models.snippet import SnippetButton
from snipcopy.page.document import Document
from snipcopy.page.element import Element, Event
from snipcopy.utils.timers import Scheduler, ThreadingScheduler

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"[\t\n\f\r ]+")
BASE64_RE = re.compile(r"[A-Za-z0-9+/]*")


def decode_payload(encoded: Optional[str]) -> str:
    """Decode a base64 snippet payload into text.

    Accepts what a browser's ``atob`` accepts: ASCII whitespace anywhere
    and missing ``=`` padding. Bytes are read as UTF-8 when they form valid
    UTF-8, otherwise one character per byte (Latin-1).

    Raises:
        DecodeError: if the payload is missing or is not base64.
    """
    if encoded is None:
        raise DecodeError("snippet payload attribute is missing")

    compact = WHITESPACE_RE.sub("", encoded)
    if len(compact) % 4 == 0:
        if compact.endswith("=="):
            compact = compact[:-2]
        elif compact.endswith("="):
            compact = compact[:-1]
    if len(compact) % 4 == 1 or not BASE64_RE.fullmatch(compact):
        raise DecodeError(f"invalid base64 payload {encoded[:40]!r}")

    raw = base64.b64decode(compact + "=" * (-len(compact) % 4))
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


@contextmanager
def temporary_surface(document: Document, text: str) -> Iterator[Element]:
    """Attach an off-screen textarea holding ``text`` for the duration of the block.

    The textarea is removed from the document when the block exits, whether
    or not it raised.
    """
    surface = document.create_element("textarea")
    surface.set_attribute("readonly", "")
    surface.set_attribute("style", "position: fixed; top: -10000px; left: -10000px;")
    surface.text_content = text
    document.body.append_child(surface)
    try:
        yield surface
    finally:
        if surface.parent is not None:
            surface.parent.remove_child(surface)


class SelectionClipboardWriter(ClipboardWriter):
    """Copies by selecting a temporary textarea and running the document's copy command."""

    name = "selection"

    def __init__(self, document: Document):
        self.document = document

    def _write(self, text: str) -> bool:
        selection = self.document.get_selection()
        with temporary_surface(self.document, text) as surface:
            selection.remove_all_ranges()
            selection.select_node_contents(surface)
            try:
                return self.document.exec_command("copy")
            finally:
                selection.remove_all_ranges()


def copy_snippet(encoded: str, clipboard: ClipboardWriter) -> str:
    """Decode ``encoded`` and put the text on ``clipboard``; returns the text."""
    text = decode_payload(encoded)
    clipboard.write(text)
    return text


class SnippetCopier:

    def __init__(
        self,
        clipboard: Optional[ClipboardWriter] = None,
        scheduler: Optional[Scheduler] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.clipboard = clipboard
        self.scheduler = scheduler or ThreadingScheduler()
        self.settings = settings or Settings()

    def initialize(self, document: Document) -> None:
        """Register the click handler on every copy button of ``document``.

        Not idempotent: a second call registers the handler a second time.
        """
        buttons = document.query_selector_all(self.settings.selector_class)
        for element in buttons:
            element.add_event_listener("click", self.on_activate)
        logger.info(f"Bound {len(buttons)} snippet copy button(s)")

    def buttons(self, document: Document):
        return [
            SnippetButton(
                element,
                payload_attribute=self.settings.payload_attribute,
                marker_class=self.settings.marker_class,
            )
            for element in document.query_selector_all(self.settings.selector_class)
        ]

    def _writer_for(self, element: Element) -> ClipboardWriter:
        if self.clipboard is not None:
            return self.clipboard

        node = element
        while node.parent is not None:
            node = node.parent
        owner = node.owner_document or element.owner_document
        if owner is None:
            raise RuntimeError(
                f"{element!r} is not attached to a document and no clipboard was given")
        return SelectionClipboardWriter(owner)

    def on_activate(self, event_or_button: Union[Event, Element, SnippetButton]) -> str:
        if isinstance(event_or_button, Event):
            element = event_or_button.current_target or event_or_button.target
        elif isinstance(event_or_button, SnippetButton):
            element = event_or_button.element
        else:
            element = event_or_button

        text = decode_payload(element.get_attribute(self.settings.payload_attribute))

        copied = self._writer_for(element).write(text)
        if not copied:
            # Marker is shown regardless; the copy command gave no success signal.
            logger.warning(f"Copy command reported failure for {element!r}")

        marker = self.settings.marker_class
        element.class_list.add(marker)
        self.scheduler.call_later(
            self.settings.revert_delay, lambda: element.class_list.remove(marker))

        logger.debug(f"Copied {len(text)} chars from {element!r}")
        return text
