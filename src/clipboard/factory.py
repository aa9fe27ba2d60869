import platform

from clipboard.base import ClipboardWriter


def get_clipboard() -> ClipboardWriter:
    """Return the clipboard writer for the running OS."""
    system = platform.system()

    if system == "Linux":
        from clipboard.linux import LinuxClipboard
        return LinuxClipboard()
    if system == "Windows":
        from clipboard.windows import WindowsClipboard
        return WindowsClipboard()
    if system == "Darwin":
        from clipboard.macos import MacOSClipboard
        return MacOSClipboard()
    raise NotImplementedError(f"No clipboard support for {system or 'this platform'}")
