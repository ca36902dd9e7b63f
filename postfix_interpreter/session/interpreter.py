"""Interactive and batch sessions evaluating postfix expressions line by line."""
from pathlib import Path
from typing import Any, List, Optional, TextIO

from pydantic import BaseModel, Field, PrivateAttr

from postfix_interpreter.common.config import InterpreterConfig
from postfix_interpreter.common.environment import Environment
from postfix_interpreter.common.errors import InterpreterError
from postfix_interpreter.common.evaluator import Evaluator
from postfix_interpreter.common.logger import logger
from postfix_interpreter.common.operations import EvaluationResult, ExpressionRequest
from postfix_interpreter.common.parser import PostfixParser
from postfix_interpreter.common.renderer import InfixRenderer
from postfix_interpreter.common.tokenizer import Tokenizer
from postfix_interpreter.session.sources import read_text_source

BANNER: str = "Enter postfix expressions (CTRL-D to exit):"


class InterpreterSession(BaseModel):
    """
    Evaluation session owning one environment.

    Lifecycle of each line:
        - Comments are stripped; blank lines are ignored
        - The expression is parsed, rendered in infix form, then evaluated
        - The result or the error is reported and the session moves on

    An error in one expression never ends the session.
    """

    environment: Environment = Field(default_factory=Environment, description="Symbol bindings of the session")
    config: InterpreterConfig = Field(default_factory=InterpreterConfig, description="Interpreter settings")

    _parser: PostfixParser = PrivateAttr()
    _evaluator: Evaluator = PrivateAttr()

    def model_post_init(self, __context: Any) -> None:
        self._parser = PostfixParser(max_depth=self.config.max_depth)
        self._evaluator = Evaluator(int_bits=self.config.int_bits, max_depth=self.config.max_depth)

    def evaluate_line(self, line: str, line_number: int = 1) -> Optional[EvaluationResult]:
        """
        Evaluate one line of input.

        :param str line: Raw line, possibly holding a trailing comment
        :param int line_number: Position of the line in its input

        :return: Result of the evaluation, or None for blank and comment-only lines
        :rtype: Optional[EvaluationResult]
        """
        tokens: List[str] = Tokenizer.tokenize(line)
        if not tokens:
            return None

        request = ExpressionRequest(expression=" ".join(tokens), line_number=line_number)
        logger.debug(f"👷🏁 Evaluating line {request.line_number}: {request.expression}")

        infix: Optional[str] = None
        try:
            tree = self._parser.parse(tokens)
            infix = InfixRenderer.render(tree)
            value = self._evaluator.evaluate(tree, self.environment)
        except InterpreterError as exc:
            logger.error(
                f"👷❌ Failed on line {request.line_number}: {exc}\n"
                f"Invalid postfix expression, could not evaluate: {request.expression!r}"
            )
            return EvaluationResult(
                expression=request.expression,
                line_number=request.line_number,
                infix=infix,
                error=str(exc),
            )

        logger.debug(f"👷✅ Line {request.line_number}: {infix} = {value}")
        return EvaluationResult(
            expression=request.expression,
            line_number=request.line_number,
            infix=infix,
            value=value,
        )

    @staticmethod
    def format_result(result: EvaluationResult) -> str:
        """
        Format a result for display.

        :param EvaluationResult result: Evaluation outcome

        :return: "<infix> = <value>" on success, "<expression> -> ERROR: <message>" otherwise
        :rtype: str
        """
        if result.ok:
            return f"{result.infix} = {result.value}"
        return f"{result.expression} -> ERROR: {result.error}"

    def run(self, stdin: TextIO, stdout: TextIO) -> None:
        """
        Read expressions from ``stdin`` until end of input, writing each result to ``stdout``.

        :param TextIO stdin: Source of expressions
        :param TextIO stdout: Destination of prompts and results
        """
        stdout.write(f"{BANNER}\n")
        line_number = 0
        while True:
            stdout.write(self.config.prompt)
            stdout.flush()
            line = stdin.readline()
            if not line:
                break
            line_number += 1
            result = self.evaluate_line(line, line_number)
            if result is not None:
                stdout.write(f"{self.format_result(result)}\n")
        stdout.write("\n")

    def run_file(self, input_file: Path, output_file: Path) -> List[EvaluationResult]:
        """
        Evaluate every expression of ``input_file`` in order and write the results to ``output_file``.

        Expressions share the session environment, so assignments made by one
        line are visible to the following ones.

        :param Path input_file: Text file or archive holding one expression per line
        :param Path output_file: Path where results will be written

        :return: Results in input order
        :rtype: List[EvaluationResult]
        """
        logger.info(f"📄 Evaluating expressions from {input_file}")
        results: List[EvaluationResult] = []
        content = read_text_source(input_file)

        with output_file.open("w", encoding="utf-8") as f_out:
            for line_number, line in enumerate(content.splitlines(), start=1):
                result = self.evaluate_line(line, line_number)
                if result is None:
                    continue
                results.append(result)
                # Write output immediately
                f_out.write(f"{self.format_result(result)}\n")
                f_out.flush()

        failed = sum(1 for result in results if not result.ok)
        logger.info(f"📄✅ {len(results)} expressions evaluated ({failed} failed), results in {output_file}")
        return results
