#!/usr/bin/env python3
"""
Z++ Programming Language Command Line Interface
Provides REPL, file execution and JavaScript emission.
"""

import sys
import logging
import argparse
from typing import Optional
import zpp


def read_entry(first_line: str) -> str:
    """Read continuation lines until an empty line when an entry opens a block."""
    lines = [first_line]
    if not first_line.rstrip().endswith(':'):
        return first_line

    while True:
        line = input("...  ")
        if line.strip() == '':
            break
        lines.append(line)

    return "\n".join(lines)


def repl(runner: zpp.Runner, infer_indent: bool = False):
    """Run the Z++ REPL (Read-Eval-Print Loop)."""
    print("Z++ Programming Language REPL")
    print(f"Version {zpp.__version__}")
    print("Type 'exit' or 'quit' to leave, 'help' for help.\n")

    show_js = False

    while True:
        try:
            line = input("zpp> ")

            if line.strip().lower() in ['exit', 'quit']:
                print("Goodbye!")
                break

            if line.strip().lower() == 'help':
                print_help()
                continue

            if line.strip() == '.js':
                show_js = not show_js
                print(f"Generated JavaScript {'shown' if show_js else 'hidden'}")
                continue

            if line.strip() == '':
                continue

            source = read_entry(line)
            if show_js:
                print(zpp.transpile(source, "<repl>", infer_indent=infer_indent))

            # Every entry runs in a fresh context; nothing carries over
            result = zpp.run_zpp(source, "<repl>", runner=runner, infer_indent=infer_indent)
            for output_line in result.lines:
                if output_line.type != zpp.LineType.INFO:
                    print(output_line.content,
                          file=sys.stderr if output_line.is_error() else sys.stdout)

        except zpp.ZppError as e:
            print(str(e), file=sys.stderr)
        except KeyboardInterrupt:
            print("\nKeyboardInterrupt")
            break
        except EOFError:
            print("\nGoodbye!")
            break


def print_help():
    """Print REPL help."""
    print("""
Z++ REPL Help:
- Type any Z++ line to run it
- A line ending in ':' opens a block; finish it with an empty line
- Type '.js' to toggle printing the generated JavaScript
- Use 'exit' or 'quit' to leave the REPL
- Press Ctrl+C or Ctrl+D to exit
- Each entry runs on its own; variables do not persist

Example usage:
  zpp> let x be 10
  zpp> bet (x > 5):
  ...    yap("x is bussin")
  ...
  x is bussin
""")


def run_source(source: str, filename: str, runner: zpp.Runner, inputs, infer_indent: bool) -> int:
    result = zpp.run_zpp(source, filename, runner=runner, inputs=inputs, infer_indent=infer_indent)
    result.print_lines()
    return 1 if result.has_errors() else 0


def read_source(filename: str) -> Optional[str]:
    try:
        with open(filename, 'r', encoding='utf-8') as file:
            return file.read()
    except FileNotFoundError:
        print(f"Error: File '{filename}' not found.", file=sys.stderr)
        return None


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='zpp',
        description="Z++ Programming Language",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                      # Start REPL
  %(prog)s script.zpp           # Run a Z++ file
  %(prog)s -c 'yap("Hi")'       # Execute code directly
  %(prog)s --emit script.zpp    # Print the generated JavaScript
        """
    )

    source = parser.add_mutually_exclusive_group()

    source.add_argument(
        'file',
        nargs='?',
        help='Z++ source file to execute'
    )

    source.add_argument(
        '-c', '--command',
        help='Execute a single command'
    )

    parser.add_argument(
        '--emit',
        action='store_true',
        help='Print the generated JavaScript instead of running it'
    )

    parser.add_argument(
        '--timeout',
        type=float,
        default=zpp.runner.DEFAULT_TIMEOUT,
        help='Seconds a program may run (default: %(default)s)'
    )

    parser.add_argument(
        '--memory',
        type=int,
        default=zpp.runner.DEFAULT_MEMORY_LIMIT_MB,
        help='Memory limit in MB (default: %(default)s)'
    )

    parser.add_argument(
        '--max-output',
        type=positive_int,
        default=zpp.runner.DEFAULT_MAX_OUTPUT_LINES,
        help='Output lines kept before truncating (default: %(default)s)'
    )

    parser.add_argument(
        '--node',
        help=f'Node.js executable (default: ${zpp.runner.NODE_ENV_VAR}, then PATH)'
    )

    parser.add_argument(
        '--input',
        action='append',
        default=[],
        metavar='VALUE',
        help='Answer for the next gimme() prompt; repeatable'
    )

    parser.add_argument(
        '--infer-indent',
        action='store_true',
        help="Close blocks at the first body line's indentation instead of header + 2"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'Z++ {zpp.__version__}'
    )

    return parser


def main(argv=None):
    """Main entry point for the Z++ CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    runner = zpp.Runner(
        node_path=args.node,
        timeout=args.timeout,
        memory_limit_mb=args.memory,
        max_output_lines=args.max_output,
    )

    try:
        if args.command is not None:
            source, filename = args.command, "<command>"
        elif args.file:
            source, filename = read_source(args.file), args.file
            if source is None:
                return 1
        else:
            if args.emit:
                print("Error: --emit needs a file or -c", file=sys.stderr)
                return 1
            repl(runner, infer_indent=args.infer_indent)
            return 0

        if args.emit:
            print(zpp.transpile(source, filename, infer_indent=args.infer_indent))
            return 0

        return run_source(source, filename, runner, args.input, args.infer_indent)

    except zpp.ZppError as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
