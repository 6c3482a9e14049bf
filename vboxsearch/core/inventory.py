import subprocess
from typing import Any, Optional, Sequence

from vboxsearch.shared.command_runner import CommandRunner

DEFAULT_LIST_COMMAND = ("vboxmanage", "list", "vms")


class InventoryUnavailable(Exception):
    """The VM list command could not be run or its output could not be read."""

    def __init__(self, command: Sequence[str], reason: str):
        self.command = list(command)
        self.reason = reason
        super().__init__(f"{' '.join(self.command)}: {reason}")


class InventoryFetcher:
    def __init__(
        self,
        logger: Any,
        command: Sequence[str] = DEFAULT_LIST_COMMAND,
        runner: Optional[CommandRunner] = None,
    ):
        self.logger = logger
        self.command = list(command)
        self.runner = runner or CommandRunner(logger)

    def fetch(self) -> str:
        """
        Runs the list command and returns its standard output as text.
        Every failure mode is raised as InventoryUnavailable.
        """
        try:
            output = self.runner.run_sync(self.command)
        except OSError as e:
            raise InventoryUnavailable(self.command, e.strerror or str(e)) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
            reason = f"exited with status {e.returncode}"
            if stderr:
                reason = f"{reason}: {stderr}"
            raise InventoryUnavailable(self.command, reason) from e
        try:
            text = output.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InventoryUnavailable(self.command, "output is not valid UTF-8") from e
        self.logger.debug(f"Fetched VM inventory ({len(text)} bytes).")
        return text
