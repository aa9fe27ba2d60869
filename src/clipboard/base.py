import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class ClipboardWriter(ABC):
    """Write-only access to the system clipboard."""

    @abstractmethod
    def _set_text(self, text: str) -> bool:
        pass

    def set_text(self, text: str) -> bool:
        try:
            ok = self._set_text(text)
        except Exception as e:
            logger.warning(f"{type(self).__name__} failed to set clipboard: {e}")
            return False
        if not ok:
            logger.warning(f"{type(self).__name__} could not set clipboard")
        return ok
