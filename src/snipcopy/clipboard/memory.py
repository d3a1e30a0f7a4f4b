from typing import List, Optional

from snipcopy.clipboard.base import ClipboardWriter
from snipcopy.errors import ClipboardUnavailable


class MemoryClipboard(ClipboardWriter):
    """In-process clipboard for dry runs.

    With ``fail=True`` every write is refused the way a host that denies
    clipboard access would refuse it.
    """

    name = "memory"

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.text: Optional[str] = None
        self.history: List[str] = []

    def _write(self, text: str) -> bool:
        if self.fail:
            raise ClipboardUnavailable("clipboard access denied")
        self.text = text
        self.history.append(text)
        return True
