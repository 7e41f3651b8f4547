"""
Structured output of one program run.
"""

import sys
from enum import Enum
from typing import List


class LineType(Enum):
    LOG = "log"
    ERROR = "error"
    INFO = "info"


COMPLETED_MESSAGE = "✓ Execution completed successfully"


class TerminalLine:
    """One tagged line of program output."""

    def __init__(self, line_type, content):
        self.type = line_type
        self.content = content

    def __str__(self):
        return f"TerminalLine({self.type.name}, {repr(self.content)})"

    def __repr__(self):
        return self.__str__()

    def __eq__(self, other):
        if not isinstance(other, TerminalLine):
            return NotImplemented
        return self.type == other.type and self.content == other.content

    def is_error(self):
        return self.type == LineType.ERROR

    def to_dict(self):
        return {"type": self.type.value, "content": self.content}


class RunResult:
    """Collects the output of a run in the order it was produced."""

    def __init__(self):
        self.lines: List[TerminalLine] = []
        self.completed = False
        self.timed_out = False

    def add(self, line_type, content):
        line = TerminalLine(line_type, content)
        self.lines.append(line)
        return line

    def log(self, content):
        """Record standard output."""
        return self.add(LineType.LOG, content)

    def error(self, content):
        """Record an error line."""
        return self.add(LineType.ERROR, content)

    def info(self, content):
        """Record an informational line."""
        return self.add(LineType.INFO, content)

    def has_errors(self):
        """Check if any error line was recorded."""
        return any(line.is_error() for line in self.lines)

    @property
    def logs(self) -> List[str]:
        return [line.content for line in self.lines if line.type == LineType.LOG]

    @property
    def errors(self) -> List[str]:
        return [line.content for line in self.lines if line.type == LineType.ERROR]

    def print_lines(self, out=None, err=None):
        """Print log and info lines to stdout, error lines to stderr."""
        out = out or sys.stdout
        err = err or sys.stderr
        for line in self.lines:
            print(line.content, file=err if line.is_error() else out)

    def to_list(self):
        return [line.to_dict() for line in self.lines]
