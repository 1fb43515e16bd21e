"""Cross-platform clipboard helpers."""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess

import pyperclip

logger = logging.getLogger(__name__)

TIMEOUT = 5


def _linux_copy_command() -> list[str] | None:
    """Pick an installed clipboard writer: xclip, then xsel, then wl-copy."""
    if shutil.which("xclip"):
        return ["xclip", "-selection", "clipboard"]
    elif shutil.which("xsel"):
        return ["xsel", "--clipboard", "--input"]
    elif shutil.which("wl-copy"):
        return ["wl-copy"]
    return None


def _linux_paste_command() -> list[str] | None:
    if shutil.which("xclip"):
        return ["xclip", "-selection", "clipboard", "-o"]
    elif shutil.which("xsel"):
        return ["xsel", "--clipboard", "--output"]
    elif shutil.which("wl-paste"):
        return ["wl-paste", "--no-newline"]
    return None


def _pyperclip_copy(text: str) -> bool:
    try:
        pyperclip.copy(text)
        return True
    except pyperclip.PyperclipException as e:
        logger.debug("pyperclip write failed: %s", e)
        return False


def _pyperclip_paste() -> str | None:
    try:
        return pyperclip.paste()
    except pyperclip.PyperclipException as e:
        logger.debug("pyperclip read failed: %s", e)
        return None


def copy_to_clipboard(text: str) -> bool:
    """Copy text to the system clipboard.

    Returns True on success, False on failure.
    """
    system = platform.system()

    try:
        if system == "Darwin":
            subprocess.run(
                ["pbcopy"], input=text.encode("utf-8"), check=True, timeout=TIMEOUT
            )
            return True

        elif system == "Windows":
            # clip.exe ships with Windows and expects UTF-16
            subprocess.run(
                ["clip.exe"], input=text.encode("utf-16le"), check=True, timeout=TIMEOUT
            )
            return True

        else:
            cmd = _linux_copy_command()
            if cmd is None:
                return _pyperclip_copy(text)
            subprocess.run(
                cmd, input=text.encode("utf-8"), check=True, timeout=TIMEOUT
            )
            return True

    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Native clipboard write failed: %s", e)
        # Last-resort fallback
        return _pyperclip_copy(text)


def paste_from_clipboard() -> str | None:
    """Read text from the system clipboard.

    Returns None when no backend can read it.
    """
    system = platform.system()

    if system == "Darwin":
        cmd = ["pbpaste"]
    elif system == "Windows":
        cmd = ["powershell", "-NoProfile", "-Command", "Get-Clipboard -Raw"]
    else:
        cmd = _linux_paste_command()

    if cmd is None:
        return _pyperclip_paste()

    try:
        proc = subprocess.run(cmd, capture_output=True, check=True, timeout=TIMEOUT)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Native clipboard read failed: %s", e)
        return _pyperclip_paste()

    text = proc.stdout.decode("utf-8", errors="replace")
    if system == "Windows":
        # Get-Clipboard appends a line break to its output
        text = text.removesuffix("\r\n")
    return text
