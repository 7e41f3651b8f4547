"""
Transpiler from Z++ to JavaScript.

Works one line at a time: indentation opens and closes brace blocks, and
every fragment of a line is looked up in the keyword table. The only state
is a stack of open block indentation levels, local to one compile call.
"""

import logging
from typing import List, Optional

from .keywords import lookup
from .lexer import Lexer

logger = logging.getLogger(__name__)


# Expected body indentation relative to a block header. Not inferred from
# the body unless infer_indent is set.
INDENT_WIDTH = 2

BLOCK_OPEN = " {"
BLOCK_CLOSE = "}"


def measure_indent(line: str) -> int:
    """Column of the first non-whitespace character. A tab counts as 1."""
    return len(line) - len(line.lstrip())


class Transpiler:
    """
    Line-oriented Z++ to JavaScript transpiler.

    Every input produces some output; there are no compile errors. Blocks
    are always balanced, though a body not indented by exactly
    INDENT_WIDTH relative to its header may close at an unexpected place.

    With infer_indent=True the first body line's actual indentation becomes
    the block's close level instead of header + INDENT_WIDTH.
    """

    def __init__(self, infer_indent: bool = False):
        self.infer_indent = infer_indent
        self.lexer = Lexer()

    def compile(self, source: str) -> str:
        """Compile Z++ source text to JavaScript source text."""
        output: List[str] = []
        indent_stack = [0]
        # Indentation of a header whose body has not been seen yet
        pending_header: Optional[int] = None
        source_lines = 0
        blocks_opened = 0

        for line in source.split("\n"):
            if line.strip() == "":
                continue

            source_lines += 1
            current_indent = measure_indent(line)

            if pending_header is not None:
                if current_indent > pending_header:
                    indent_stack[-1] = current_indent
                pending_header = None

            # Dedent closes every block deeper than this line
            while current_indent < indent_stack[-1]:
                indent_stack.pop()
                output.append(BLOCK_CLOSE)

            processed = line.strip()
            if processed.endswith(":"):
                processed = processed[:-1] + BLOCK_OPEN
                indent_stack.append(current_indent + INDENT_WIDTH)
                blocks_opened += 1
                if self.infer_indent:
                    pending_header = current_indent

            output.append(self.translate_line(processed))

        while len(indent_stack) > 1:
            indent_stack.pop()
            output.append(BLOCK_CLOSE)

        logger.debug(
            "compiled %d source lines into %d target lines (%d blocks)",
            source_lines, len(output), blocks_opened,
        )
        return "\n".join(output)

    def translate_line(self, line: str) -> str:
        """Substitute keywords in one trimmed line, leaving quoted text alone."""
        fragments = self.lexer.tokenize_line(line)
        return "".join(
            fragment.value if fragment.is_literal() else lookup(fragment.value)
            for fragment in fragments
        )


def compile_to_js(source: str, infer_indent: bool = False) -> str:
    """Compile Z++ source to JavaScript with a fresh transpiler."""
    return Transpiler(infer_indent=infer_indent).compile(source)
