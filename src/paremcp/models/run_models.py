"""Data models exchanged with the CLI runner."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RunResult:
    """Outcome of one CLI subprocess run."""

    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0
    duration_ms: int = 0

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    @property
    def raw_output(self) -> str:
        """Text the output shaping layer uses as its size baseline."""
        return self.stdout
