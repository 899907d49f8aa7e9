"""CommandRunner: runs external generators and installers.

Commands inherit the terminal's stdin and stdout so interactive generators
can ask their own questions. stderr is forwarded to the terminal while also
being captured, so failures can be reported after the fact.
"""

import codecs
import subprocess
import sys
import threading
from dataclasses import dataclass
from typing import List

from wspkg.materialize.managed_subprocess import ManagedSubprocess

INTERRUPTED_RETURNCODE = 130


@dataclass
class CommandResult:
    """Exit status and captured stderr of one external command."""
    returncode: int
    stderr: str = ""

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


def _forward(text: str, chunks: List[str]):
    if not text:
        return
    chunks.append(text)
    sys.stderr.write(text)
    sys.stderr.flush()


def _read_pipe_to_stderr(pipe, chunks: List[str]):
    """Read stderr pipe, forwarding output to stderr.

    Decoding is incremental so a UTF-8 sequence split across reads survives.
    """
    decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')
    while True:
        chunk = pipe.read1(4096) if hasattr(pipe, 'read1') else pipe.read(4096)
        if not chunk:
            break
        _forward(decoder.decode(chunk), chunks)
    _forward(decoder.decode(b'', final=True), chunks)


def run_command(cmd: List[str], cwd: str) -> CommandResult:
    """Run *cmd* in *cwd*, streaming stdio and capturing stderr.

    A missing executable is reported as exit status 127, like a shell would.
    """
    try:
        process = subprocess.Popen(cmd, cwd=cwd, stderr=subprocess.PIPE)
    except FileNotFoundError as exc:
        return CommandResult(returncode=127, stderr=f"{exc}\n")

    stderr_chunks: List[str] = []
    stderr_thread = threading.Thread(
        target=_read_pipe_to_stderr,
        args=(process.stderr, stderr_chunks),
    )
    stderr_thread.start()

    with ManagedSubprocess(
        process=process,
        label=cmd[0],
        threads=[stderr_thread],
    ) as managed:
        process.wait()

    if managed.interrupted:
        return CommandResult(returncode=INTERRUPTED_RETURNCODE, stderr=''.join(stderr_chunks))

    stderr_thread.join()
    return CommandResult(returncode=process.returncode, stderr=''.join(stderr_chunks))


def print_command_failure(label: str, result: CommandResult) -> None:
    """Print a short failure message followed by the captured stderr."""
    print(f"\nError: {label} failed (exit code {result.returncode}).", file=sys.stderr)
    captured = result.stderr.strip()
    if captured:
        print("Captured error output:", file=sys.stderr)
        for line in captured.splitlines():
            print(f"  {line}", file=sys.stderr)


class CommandRunner:
    """Delegates to the module-level run_command function."""

    def run(self, cmd: List[str], cwd: str) -> CommandResult:
        return run_command(cmd, cwd=cwd)


def run_checked(runner, cmd: List[str], cwd: str, label: str) -> CommandResult:
    """Run *cmd* through *runner*; on failure report it and exit.

    The process exits with the command's own status, or 1 when the child was
    killed by a signal.
    """
    result = runner.run(cmd, cwd=cwd)
    if not result.succeeded:
        print_command_failure(label, result)
        sys.exit(result.returncode if result.returncode > 0 else 1)
    return result
