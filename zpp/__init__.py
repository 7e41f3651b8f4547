"""
Z++ Programming Language
A slang-keyword scripting language that transpiles to JavaScript.

Version: 0.1.0
Author: Z++ Development Team
"""

__version__ = "0.1.0"
__author__ = "Z++ Development Team"

import logging
from typing import Iterable, Optional

from .keywords import KEYWORDS, lookup, keyword_names, keyword_hints
from .fragment import Fragment, FragmentType
from .lexer import Lexer
from .transpiler import Transpiler, compile_to_js, INDENT_WIDTH
from .output import LineType, TerminalLine, RunResult
from .runner import Runner
from .errors import ZppError, CompilationError, RuntimeNotFoundError, ExecutionError

__all__ = [
    "KEYWORDS",
    "lookup",
    "keyword_names",
    "keyword_hints",
    "Fragment",
    "FragmentType",
    "Lexer",
    "Transpiler",
    "INDENT_WIDTH",
    "LineType",
    "TerminalLine",
    "RunResult",
    "Runner",
    "ZppError",
    "CompilationError",
    "RuntimeNotFoundError",
    "ExecutionError",
    "compile_to_js",
    "transpile",
    "run_zpp",
    "run_file",
]

logger = logging.getLogger(__name__)


def transpile(source_code: str, filename: str = "<stdin>", infer_indent: bool = False) -> str:
    """
    Compile Z++ source to JavaScript.

    The transpiler accepts any text, so a CompilationError here means a
    fault of the host, not a mistake in the program.
    """
    try:
        return compile_to_js(source_code, infer_indent=infer_indent)
    except Exception as e:
        logger.exception("transpiler failed on %s", filename)
        raise CompilationError(str(e), filename=filename) from e


def run_zpp(source_code: str, filename: str = "<stdin>", runner: Optional[Runner] = None,
            inputs: Optional[Iterable[str]] = None, infer_indent: bool = False) -> RunResult:
    """
    Compile and run Z++ source code.

    Args:
        source_code: The Z++ source code to execute
        filename: Name used in runtime error locations
        runner: Runner to execute with; a default Runner when omitted
        inputs: Values handed out one by one to `gimme` prompts
        infer_indent: Close blocks at the first body line's indentation

    Returns:
        The tagged output lines of the run
    """
    try:
        js_code = transpile(source_code, filename, infer_indent=infer_indent)
    except CompilationError as e:
        result = RunResult()
        result.error(f"Compilation Error: {e.message}")
        return result

    runner = runner or Runner()
    return runner.run(js_code, inputs=inputs, filename=filename)


def run_file(filename: str, runner: Optional[Runner] = None,
             inputs: Optional[Iterable[str]] = None, infer_indent: bool = False) -> RunResult:
    """
    Run a Z++ source file.

    Raises FileNotFoundError when the file does not exist.
    """
    with open(filename, 'r', encoding='utf-8') as file:
        source_code = file.read()
    return run_zpp(source_code, filename, runner=runner, inputs=inputs, infer_indent=infer_indent)
