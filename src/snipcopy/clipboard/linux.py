import os
import shutil
import subprocess
from typing import List, Optional

from snipcopy.clipboard.base import ClipboardWriter
from snipcopy.errors import ClipboardUnavailable


class LinuxClipboard(ClipboardWriter):
    name = "linux"

    def __init__(self, timeout: float = 2.0):
        self.timeout = timeout

    def _command(self) -> Optional[List[str]]:
        if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-copy"):
            return ["wl-copy"]
        if shutil.which("xclip"):
            return ["xclip", "-selection", "clipboard"]
        return None

    def _write(self, text: str) -> bool:
        command = self._command()
        if command is None:
            raise ClipboardUnavailable(
                "no clipboard tool found (install wl-clipboard or xclip)")

        try:
            subprocess.run(
                command,
                input=text.encode("utf-8"),
                check=True,
                timeout=self.timeout,
            )
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError) as e:
            raise ClipboardUnavailable(f"{command[0]} failed: {e}") from e
        return True
