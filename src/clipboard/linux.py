import os
import shutil
import subprocess
from typing import List, Optional

from clipboard.base import ClipboardWriter


class LinuxClipboard(ClipboardWriter):
    _TIMEOUT = 2.0

    def _command(self) -> Optional[List[str]]:
        if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-copy"):
            return ["wl-copy"]
        if shutil.which("xclip"):
            return ["xclip", "-selection", "clipboard"]
        if shutil.which("xsel"):
            return ["xsel", "--clipboard", "--input"]
        return None

    def _set_text(self, text: str) -> bool:
        command = self._command()
        if command is None:
            return False

        try:
            subprocess.run(
                command,
                input=text.encode("utf-8"),
                check=True,
                timeout=self._TIMEOUT,
            )
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError):
            return False
        return True
