"""
Clipboard writers.

A unified ``ClipboardWriter`` interface over the platform clipboards and an
in-memory clipboard.
"""

from snipcopy.clipboard.base import ClipboardWriter
from snipcopy.clipboard.factory import get_clipboard_class, get_clipboard_writer
from snipcopy.clipboard.memory import MemoryClipboard

__all__ = [
    'ClipboardWriter',
    'MemoryClipboard',
    'get_clipboard_class',
    'get_clipboard_writer',
]
