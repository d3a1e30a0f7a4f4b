"""
Clipboard writer factory.

Picks the clipboard implementation for the current platform, or the one
named explicitly by configuration.
"""

import platform
from typing import Type

from snipcopy.clipboard.base import ClipboardWriter


def get_clipboard_class(backend: str = "auto") -> Type[ClipboardWriter]:
    """
    Get the ClipboardWriter implementation for ``backend``.

    Args:
        backend: ``auto`` to detect from the running platform, or one of
            ``linux``, ``macos``, ``windows``, ``memory``.

    Raises:
        NotImplementedError: If the platform or backend is not supported
    """
    backend = (backend or "auto").lower()

    if backend == "memory":
        from snipcopy.clipboard.memory import MemoryClipboard
        return MemoryClipboard

    if backend == "auto":
        system = platform.system()
        backend = {"Windows": "windows", "Linux": "linux", "Darwin": "macos"}.get(system, system)

    if backend == "windows":
        from snipcopy.clipboard.windows import WindowsClipboard
        return WindowsClipboard
    elif backend == "linux":
        from snipcopy.clipboard.linux import LinuxClipboard
        return LinuxClipboard
    elif backend == "macos":
        from snipcopy.clipboard.macos import MacOSClipboard
        return MacOSClipboard
    else:
        raise NotImplementedError(f"Platform '{backend}' is not supported")


def get_clipboard_writer(backend: str = "auto") -> ClipboardWriter:
    clipboard_class = get_clipboard_class(backend)
    return clipboard_class()
