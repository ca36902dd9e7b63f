"""Load symbol definitions from a text file into an environment."""
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, FilePath

from postfix_interpreter.common.environment import Environment
from postfix_interpreter.common.errors import InvalidSymbolNameError, SymbolFileError
from postfix_interpreter.common.logger import logger
from postfix_interpreter.common.tokenizer import INTEGER_PATTERN, Tokenizer
from postfix_interpreter.session.sources import read_text_source


class SymbolLoader(BaseModel):
    """
    Reader for symbol files.

    File format:
        - One "<name> <integer>" record per line, fields separated by whitespace
        - '#' starts a comment running to the end of the line
        - Blank and comment-only lines are skipped

    Any malformed record stops the load: the caller decides whether that is fatal.
    """

    model_config = ConfigDict(frozen=True)

    path: FilePath = Field(..., description="Symbol file, plain text or archive")

    def parse_records(self) -> List[Tuple[int, str, int]]:
        """
        Read and validate every record of the file.

        :return: Tuples of (line_number, name, value)
        :rtype: List[Tuple[int, str, int]]
        :raises SymbolFileError: If a line is not a "<name> <integer>" pair
        """
        records: List[Tuple[int, str, int]] = []
        for line_number, line in enumerate(read_text_source(self.path).splitlines(), start=1):
            fields = Tokenizer.tokenize(line)
            if not fields:
                continue
            if len(fields) != 2 or not INTEGER_PATTERN.fullmatch(fields[1]):
                raise SymbolFileError(self.path, line_number, f"Expected '<name> <integer>', got {line.strip()!r}")
            records.append((line_number, fields[0], int(fields[1])))
        return records

    def load(self, env: Environment) -> int:
        """
        Define every symbol of the file in ``env``.

        :param Environment env: Environment receiving the definitions

        :return: Number of symbols defined
        :rtype: int
        :raises SymbolFileError: On a malformed record or an invalid symbol name
        """
        logger.info(f"📂 Loading symbols from {self.path}")
        records = self.parse_records()
        for line_number, name, value in records:
            try:
                env.define(name, value)
            except InvalidSymbolNameError as exc:
                raise SymbolFileError(self.path, line_number, str(exc)) from exc
        logger.info(f"📂✅ Loaded {len(records)} symbols from {self.path}")
        return len(records)
