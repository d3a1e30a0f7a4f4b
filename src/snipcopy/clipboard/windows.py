import time

import win32clipboard as wc

from snipcopy.clipboard.base import ClipboardWriter
from snipcopy.errors import ClipboardUnavailable


class WindowsClipboard(ClipboardWriter):
    name = "windows"

    def _write(self, text: str) -> bool:
        opened = False
        for _ in range(3):
            try:
                wc.OpenClipboard()
                opened = True
                break
            except Exception:
                time.sleep(0.05)

        if not opened:
            raise ClipboardUnavailable("could not open the Windows clipboard")

        try:
            wc.EmptyClipboard()
            wc.SetClipboardData(wc.CF_UNICODETEXT, text)
        finally:
            wc.CloseClipboard()
        return True
