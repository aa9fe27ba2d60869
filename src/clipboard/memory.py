from typing import List

from clipboard.base import ClipboardWriter


class MemoryClipboard(ClipboardWriter):
    """Keeps written text in memory. Used by tests and headless runs."""

    def __init__(self, fail: bool = False):
        self.history: List[str] = []
        self.fail = fail

    @property
    def text(self) -> str:
        return self.history[-1] if self.history else ""

    def _set_text(self, text: str) -> bool:
        if self.fail:
            raise RuntimeError("clipboard unavailable")
        self.history.append(text)
        return True
