import time

import win32clipboard as wc

from clipboard.base import ClipboardWriter


class WindowsClipboard(ClipboardWriter):

    def _set_text(self, text: str) -> bool:
        opened = False
        for _ in range(3):
            try:
                wc.OpenClipboard()
                opened = True
                break
            except Exception:
                time.sleep(0.05)

        if not opened:
            return False

        try:
            wc.EmptyClipboard()
            wc.SetClipboardData(wc.CF_UNICODETEXT, text)
            return True
        finally:
            wc.CloseClipboard()
