import subprocess
from typing import Any, List, Sequence


class CommandRunner:
    def __init__(self, logger: Any):
        self.logger = logger

    def run_sync(self, argv: Sequence[str]) -> bytes:
        """
        Run `argv` to completion and return its raw standard output.
        Raises OSError when the process cannot be spawned and
        subprocess.CalledProcessError on a non-zero exit status.
        """
        self.logger.debug(f"Running command: {' '.join(argv)}")
        result = subprocess.run(
            list(argv),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=True,
        )
        return result.stdout

    def spawn(self, argv: Sequence[str]) -> bool:
        """
        Start `argv` detached from this process without waiting for it.
        Failures are logged and reported through the return value only.
        """
        try:
            subprocess.Popen(
                list(argv),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
            self.logger.info(f"Command started: {' '.join(argv)}")
            return True
        except OSError as e:
            self.logger.error(f"Error running command: {' '.join(argv)}: {e}")
            return False


def expand_command(template: Sequence[str], **values: str) -> List[str]:
    """Substitutes `{placeholders}` in every argument of a command template."""
    return [arg.format(**values) for arg in template]
