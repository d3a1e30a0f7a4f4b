from dataclasses import dataclass
from enum import Enum
from typing import Optional

from snipcopy.config import DEFAULT_MARKER_CLASS, DEFAULT_PAYLOAD_ATTRIBUTE
from snipcopy.page.element import Element


class ButtonState(str, Enum):
    IDLE = "idle"
    COPIED = "copied"


@dataclass(frozen=True)
class SnippetButton:
    """Read-only view over a rendered copy button."""
    element: Element
    payload_attribute: str = DEFAULT_PAYLOAD_ATTRIBUTE
    marker_class: str = DEFAULT_MARKER_CLASS

    @property
    def encoded_payload(self) -> Optional[str]:
        return self.element.get_attribute(self.payload_attribute)

    @property
    def state(self) -> ButtonState:
        if self.element.class_list.contains(self.marker_class):
            return ButtonState.COPIED
        return ButtonState.IDLE
