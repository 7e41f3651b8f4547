"""
Execution boundary for generated JavaScript.

Every run gets its own Node.js process and a fresh vm context inside it,
bounded in time, memory and output volume. Console output comes back as a
RunResult of tagged lines.
"""

import json
import logging
import os
import re
import shutil
import signal
import subprocess
from pathlib import Path
from typing import Iterable, Optional

from .errors import ExecutionError, RuntimeNotFoundError
from .output import COMPLETED_MESSAGE, RunResult

logger = logging.getLogger(__name__)


HARNESS_PATH = Path(__file__).parent / "runtime" / "harness.js"

NODE_ENV_VAR = "ZPP_NODE"
DEFAULT_TIMEOUT = 5.0
DEFAULT_MEMORY_LIMIT_MB = 128
DEFAULT_MAX_OUTPUT_LINES = 1000
# Extra seconds the process gets after the vm timeout before it is killed
KILL_GRACE = 2.0

# V8 aborts when the heap limit is hit: 134 through a shell, -SIGABRT directly
OUT_OF_MEMORY_STATUSES = (134, -signal.SIGABRT)
STDERR_REASON = re.compile(r'^(FATAL ERROR|\w*Error):')


class Runner:
    """
    Runs JavaScript in an isolated Node.js vm context.

    Args:
        node_path: Node executable; defaults to $ZPP_NODE, then PATH
        timeout: Wall-clock budget in seconds for one run
        memory_limit_mb: V8 old-space limit for the child process
        max_output_lines: Captured console lines before output is cut off;
            0 disables the cap
    """

    def __init__(self, node_path: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT,
                 memory_limit_mb: int = DEFAULT_MEMORY_LIMIT_MB,
                 max_output_lines: int = DEFAULT_MAX_OUTPUT_LINES):
        self.node_path = node_path
        self.timeout = timeout
        self.memory_limit_mb = memory_limit_mb
        self.max_output_lines = max_output_lines

    def resolve_node(self) -> str:
        """Locate the Node.js executable or raise RuntimeNotFoundError."""
        node = self.node_path or os.environ.get(NODE_ENV_VAR) or shutil.which("node")
        if not node:
            raise RuntimeNotFoundError(
                f"Node.js executable not found; install node or set {NODE_ENV_VAR}"
            )
        return node

    def build_command(self, node: str) -> list:
        return [node, f"--max-old-space-size={self.memory_limit_mb}", str(HARNESS_PATH)]

    def run(self, js_code: str, inputs: Optional[Iterable[str]] = None,
            filename: str = "<zpp>") -> RunResult:
        """
        Execute generated code and collect its output.

        Thrown errors, syntax errors in the generated code and timeouts are
        reported as error lines. Only faults of the host (no node, harness
        crash) raise.
        """
        command = self.build_command(self.resolve_node())
        request = json.dumps({
            "code": js_code,
            "filename": filename,
            "timeout_ms": int(self.timeout * 1000),
            "inputs": [str(value) for value in (inputs or [])],
            "max_output_lines": self.max_output_lines,
        })
        logger.debug("running %s", " ".join(command))

        result = RunResult()
        try:
            proc = subprocess.run(
                command,
                input=request,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.timeout + KILL_GRACE,
            )
        except subprocess.TimeoutExpired as e:
            logger.warning("run of %s killed after %.1fs", filename, e.timeout)
            if e.stdout:
                stdout = e.stdout.decode("utf-8", "replace") if isinstance(e.stdout, bytes) else e.stdout
                self.collect(stdout, result)
            result.timed_out = True
            result.error(f"Runtime Error: Script execution timed out after {self.timeout:g}s")
            return result
        except OSError as e:
            raise RuntimeNotFoundError(f"Cannot start {command[0]}: {e}") from e

        started = self.collect(proc.stdout, result)

        if not started:
            raise ExecutionError(
                f"Execution harness failed with exit status {proc.returncode}",
                returncode=proc.returncode, stderr=proc.stderr, filename=filename,
            )

        if proc.returncode != 0 and not result.has_errors():
            logger.warning("node exited with status %d", proc.returncode)
            result.error(f"Runtime Error: {self.describe_exit(proc.returncode, proc.stderr)}")

        return result

    def describe_exit(self, returncode: int, stderr: str) -> str:
        """Reason for an abnormal node exit, taken from its stderr."""
        stderr = stderr or ""
        if returncode in OUT_OF_MEMORY_STATUSES or "heap out of memory" in stderr:
            return f"memory limit of {self.memory_limit_mb} MB exceeded"

        # Node ends its stderr with native frames or a version banner
        for line in stderr.splitlines():
            if STDERR_REASON.match(line.strip()):
                return line.strip()

        return _last_line(stderr) or f"process exited with status {returncode}"

    def collect(self, stdout: str, result: RunResult) -> bool:
        """
        Translate harness records into result lines.

        Returns whether the harness reported that it started.
        """
        started = False
        finished = False
        failed = False

        for raw in stdout.splitlines():
            if not raw.strip():
                continue
            try:
                record = json.loads(raw)
            except json.JSONDecodeError:
                result.log(raw)
                continue

            kind = record.get("type")
            content = record.get("content", "")

            if kind == "start":
                started = True
            elif kind == "log":
                result.log(content)
            elif kind == "error":
                result.error(content)
            elif kind == "exception":
                failed = True
                result.error(f"Runtime Error: {content}")
            elif kind == "truncated":
                result.info(f"Output truncated after {content} lines")
            elif kind == "done":
                finished = True
            else:
                logger.debug("ignoring harness record %r", record)

        # An exception may still arrive after done, e.g. an unhandled rejection
        if finished and not failed:
            result.completed = True
            result.info(COMPLETED_MESSAGE)

        return started


def _last_line(text: str) -> str:
    lines = [line.strip() for line in (text or "").splitlines() if line.strip()]
    return lines[-1] if lines else ""
