"""Desktop notifications (best-effort)."""

from __future__ import annotations

import logging
import platform
import shutil
import subprocess

logger = logging.getLogger(__name__)

# Balloon tips need a live NotifyIcon; keep it around for the display time.
_POWERSHELL_BALLOON = """\
Add-Type -AssemblyName System.Windows.Forms
$n = New-Object System.Windows.Forms.NotifyIcon
$n.Icon = [System.Drawing.SystemIcons]::Information
$n.Visible = $true
$n.ShowBalloonTip({ms}, '{title}', '{message}', 'None')
Start-Sleep -Milliseconds {ms}
$n.Dispose()
"""


def _applescript_quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _powershell_quote(value: str) -> str:
    return value.replace("'", "''")


def _build_command(title: str, message: str, timeout: float) -> list[str] | None:
    """Build the notification command for the current platform."""
    system = platform.system()
    ms = int(timeout * 1000)

    if system == "Linux":
        if shutil.which("notify-send") is None:
            return None
        return ["notify-send", "-t", str(ms), title, message]
    elif system == "Darwin":
        script = (
            f"display notification {_applescript_quote(message)} "
            f"with title {_applescript_quote(title)}"
        )
        return ["osascript", "-e", script]
    elif system == "Windows":
        script = _POWERSHELL_BALLOON.format(
            ms=ms,
            title=_powershell_quote(title),
            message=_powershell_quote(message),
        )
        return ["powershell", "-NoProfile", "-Command", script]
    return None


def notify(title: str, message: str, timeout: float = 3) -> bool:
    """Show a desktop notification.

    Returns True if the notification was dispatched, False otherwise.
    Never raises.
    """
    cmd = _build_command(title, message, timeout)
    if cmd is None:
        logger.debug("No notification backend on %s", platform.system())
        return False

    try:
        if platform.system() == "Windows":
            # The balloon script sleeps for the display time; don't wait on it.
            subprocess.Popen(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
            return True

        subprocess.run(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=True,
            timeout=timeout + 5,
        )
        return True
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("Notification command failed: %s", e)
        return False
