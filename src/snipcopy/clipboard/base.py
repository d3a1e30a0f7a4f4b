import logging
from abc import ABC, abstractmethod

from snipcopy.errors import ClipboardError, ClipboardUnavailable

logger = logging.getLogger(__name__)


class ClipboardWriter(ABC):
    """Places plain text on a clipboard.

    Subclasses implement ``_write``. A ``False`` return means the platform
    ran the copy command but reported that nothing was copied; refusal or a
    missing backend is raised as ``ClipboardUnavailable``.
    """

    name = "abstract"

    @abstractmethod
    def _write(self, text: str) -> bool:
        pass

    def write(self, text: str) -> bool:
        try:
            copied = self._write(text)
        except ClipboardError:
            raise
        except Exception as e:
            logger.warning(f"{self.name} clipboard write failed: {e}")
            raise ClipboardUnavailable(str(e)) from e

        logger.debug(f"{self.name} clipboard write: {len(text)} chars, copied={copied}")
        return bool(copied)
