"""Ctrl+C cleanup for generator and installer processes.

Children run in the terminal's own process group so interactive generators
can prompt on stdin. Ctrl+C therefore reaches the child directly, and there
is no separate session to forward job-control signals to; the manager only
has to make sure the child has exited before control returns.
"""

import subprocess
import sys
import threading
from typing import List, Optional


class ManagedSubprocess:
    """Context manager that cleans up a child process on Ctrl+C."""

    def __init__(
        self,
        process: subprocess.Popen,
        label: str,
        threads: Optional[List[threading.Thread]] = None,
        terminate_timeout: float = 5.0,
    ):
        self.process = process
        self.label = label
        self.threads = threads or []
        self.terminate_timeout = terminate_timeout
        self.interrupted = False

    def __enter__(self) -> "ManagedSubprocess":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is KeyboardInterrupt:
            return self._handle_interrupt()
        return False

    def _handle_interrupt(self) -> bool:
        print(
            f"\nInterrupted. Terminating {self.label} process...",
            file=sys.stderr,
        )
        if self.process.poll() is None:
            self.process.terminate()
        try:
            self.process.wait(timeout=self.terminate_timeout)
        except subprocess.TimeoutExpired:
            print(
                f"Force-killing {self.label} process...",
                file=sys.stderr,
            )
            self.process.kill()
            self.process.wait()
        for thread in self.threads:
            thread.join(timeout=self.terminate_timeout)
        print("Done.", file=sys.stderr)
        self.interrupted = True
        return True
