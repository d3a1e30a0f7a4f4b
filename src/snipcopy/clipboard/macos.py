import os
import shutil
import subprocess

from snipcopy.clipboard.base import ClipboardWriter
from snipcopy.errors import ClipboardUnavailable


class MacOSClipboard(ClipboardWriter):
    name = "macos"

    def __init__(self, timeout: float = 2.0):
        self.timeout = timeout

    def _write(self, text: str) -> bool:
        if not shutil.which("pbcopy"):
            raise ClipboardUnavailable("pbcopy not found")

        try:
            subprocess.run(
                ["pbcopy"],
                input=text.encode("utf-8"),
                check=True,
                timeout=self.timeout,
                env={**os.environ, "LANG": "en_US.UTF-8"},
            )
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired) as e:
            raise ClipboardUnavailable(f"pbcopy failed: {e}") from e
        return True
