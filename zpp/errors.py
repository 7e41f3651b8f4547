"""
Error hierarchy for the Z++ toolchain.

The transpiler itself never raises for any input; these errors describe
faults of the host environment around it.
"""


class ZppError(Exception):
    """Base class for all Z++ toolchain errors."""

    def __init__(self, message, line=None, column=None, filename=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename

    def __str__(self):
        location = ""
        if self.filename:
            location += f"File \"{self.filename}\""
        if self.line is not None:
            location += f", line {self.line}"
        if self.column is not None:
            location += f", column {self.column}"

        if location:
            return f"{self.__class__.__name__}: {location}\n  {self.message}"
        return f"{self.__class__.__name__}: {self.message}"


class CompilationError(ZppError):
    """Unexpected fault raised while generating JavaScript."""
    pass


class RuntimeNotFoundError(ZppError):
    """No Node.js executable available to run generated code."""
    pass


class ExecutionError(ZppError):
    """The execution harness died without reporting a result."""

    def __init__(self, message, returncode=None, stderr="", filename=None):
        super().__init__(message, filename=filename)
        self.returncode = returncode
        self.stderr = stderr
