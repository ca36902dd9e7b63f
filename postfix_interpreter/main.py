"""
Command-line entrypoint of the postfix interpreter.

This script:
- Loads an optional symbol file into the session environment
- Dumps the symbol table
- Evaluates expressions interactively, or from a file with --batch
- Dumps the symbol table again once input is exhausted

Usage:
    postfix-interp [symbol_file] [--batch FILE] [--max-depth N] [--int-bits N] [--verbose]
"""

import argparse
from pathlib import Path
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, FilePath, ValidationError

from postfix_interpreter.common.config import InterpreterConfig
from postfix_interpreter.common.environment import Environment
from postfix_interpreter.common.logger import logger, set_verbose
from postfix_interpreter.session.interpreter import InterpreterSession
from postfix_interpreter.session.loader import SymbolLoader


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    symbol_file : Optional[FilePath]
        File holding "<name> <integer>" symbol definitions.
    batch_file : Optional[FilePath]
        File holding one postfix expression per line, evaluated instead of reading stdin.
    config : InterpreterConfig
        Interpreter settings.
    """

    symbol_file: Optional[FilePath] = None
    batch_file: Optional[FilePath] = None
    config: InterpreterConfig = Field(default_factory=InterpreterConfig)


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param list argv: Arguments, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="postfix-interp",
        description="Evaluate postfix expressions against a symbol table",
    )

    parser.add_argument(
        "symbol_file",
        nargs="?",
        help="Path to a file of '<name> <integer>' symbol definitions",
    )
    parser.add_argument(
        "--batch",
        dest="batch_file",
        help="Evaluate the expressions of this file instead of reading standard input",
    )
    parser.add_argument("--max-depth", type=int, default=500, help="Maximum expression nesting depth")
    parser.add_argument("--int-bits", type=int, default=32, help="Width of the wrapping integer arithmetic")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            symbol_file=args.symbol_file,
            batch_file=args.batch_file,
            config=InterpreterConfig(
                max_depth=args.max_depth,
                int_bits=args.int_bits,
                verbose=args.verbose,
            ),
        )
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct a safe output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/expressions.7z
    output: resources/expressions_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    stem = input_path.name[: -len("".join(input_path.suffixes))] if input_path.suffixes else input_path.name
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def dump_table(environment: Environment) -> None:
    """Log the current symbol table."""
    logger.info("📒 SYMBOL TABLE:")
    for row in environment.dump():
        logger.info(f"\t{row}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function executed by the console script.

    :return: Process exit status
    :rtype: int
    """
    cli_args = parse_args(argv)
    set_verbose(cli_args.config.verbose)

    environment = Environment()
    if cli_args.symbol_file is not None:
        try:
            SymbolLoader(path=cli_args.symbol_file).load(environment)
        except ValueError as exc:
            logger.error(f"📂❌ Error loading symbol table: {exc}")
            return 1

    dump_table(environment)

    session = InterpreterSession(environment=environment, config=cli_args.config)
    if cli_args.batch_file is not None:
        input_path = Path(cli_args.batch_file)
        try:
            session.run_file(input_path, build_output_path(input_path))
        except ValueError as exc:
            logger.error(f"📄❌ {exc}")
            return 1
    else:
        session.run(sys.stdin, sys.stdout)

    dump_table(environment)
    return 0


if __name__ == "__main__":
    sys.exit(main())
