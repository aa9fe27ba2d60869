from AppKit import NSPasteboard, NSPasteboardTypeString

from clipboard.base import ClipboardWriter


class MacOSClipboard(ClipboardWriter):

    def _set_text(self, text: str) -> bool:
        pasteboard = NSPasteboard.generalPasteboard()
        pasteboard.clearContents()
        return bool(pasteboard.setString_forType_(text, NSPasteboardTypeString))
