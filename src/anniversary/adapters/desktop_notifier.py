"""Desktop notifier adapter - subprocess wrapper for notify-send / osascript."""

import logging
import subprocess
import sys

logger = logging.getLogger(__name__)


class DesktopNotifier:
    """
    Desktop notification adapter.

    Implements Notifier protocol. Uses osascript on macOS and notify-send
    everywhere else.
    """

    def __init__(self, app_name: str = "Anniversary Mate", timeout: int = 10):
        self.app_name = app_name
        self.timeout = timeout

    def _command(self, title: str, body: str) -> list[str]:
        if sys.platform == "darwin":
            script = f"display notification {_applescript_string(body)} with title {_applescript_string(title)}"
            return ["osascript", "-e", script]
        return ["notify-send", "--app-name", self.app_name, title, body]

    def notify(self, title: str, body: str) -> None:
        cmd = self._command(title, body)
        try:
            subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as e:
            logger.warning(f"{cmd[0]} failed: {e.stderr or e}")
        except FileNotFoundError:
            logger.warning(f"{cmd[0]} not found - desktop notifications unavailable")
        except subprocess.TimeoutExpired:
            logger.warning(f"{cmd[0]} timed out after {self.timeout}s")


def _applescript_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
