# mfnf/transformations/texvc.py
"""texvccheck subprocess wrapper.

Formulas are checked and normalized by MediaWiki's texvccheck tool, which
takes the formula as its only argument and prints a status code followed
by the normalized formula or the name of the offending function.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import Literal, Protocol

from mfnf.config import get_texvccheck_path, get_texvccheck_timeout

logger = logging.getLogger(__name__)


class FormulaCheckerError(Exception):
    """Raised when the formula checker cannot be run."""

    pass


@dataclass(frozen=True)
class TexOk:
    """The formula is valid; ``text`` is its normalized form."""

    text: str
    type: Literal["ok"] = "ok"


@dataclass(frozen=True)
class TexUnknownFunction:
    name: str
    type: Literal["unknown_function"] = "unknown_function"


@dataclass(frozen=True)
class TexSyntaxError:
    type: Literal["syntax_error"] = "syntax_error"


@dataclass(frozen=True)
class TexLexingError:
    type: Literal["lexing_error"] = "lexing_error"


@dataclass(frozen=True)
class TexUnknownError:
    type: Literal["unknown_error"] = "unknown_error"


TexResult = TexOk | TexUnknownFunction | TexSyntaxError | TexLexingError | TexUnknownError


class FormulaChecker(Protocol):
    """Anything that can check a single formula."""

    def check(self, formula: str) -> TexResult: ...


def parse_texvc_output(output: str) -> TexResult:
    """Translate texvccheck output into a TexResult."""
    output = output.rstrip("\r\n")
    status, rest = output[:1], output[1:]
    if status == "+":
        return TexOk(text=rest)
    if status == "F":
        return TexUnknownFunction(name=rest.strip())
    if status == "S":
        return TexSyntaxError()
    if status == "E":
        return TexLexingError()
    return TexUnknownError()


class TexvcChecker:
    """
    Check formulas by running texvccheck once per formula.

    Results are cached per instance, since the same formula usually occurs
    many times in a book.
    """

    def __init__(self, executable: str | None = None, timeout: float | None = None):
        self.executable = executable or get_texvccheck_path()
        self.timeout = timeout if timeout is not None else get_texvccheck_timeout()
        self._cache: dict[str, TexResult] = {}

    def check(self, formula: str) -> TexResult:
        """
        Check a formula.

        Raises:
            FormulaCheckerError: If texvccheck is missing, does not finish in
                time, or fails without printing a status
        """
        if formula in self._cache:
            return self._cache[formula]

        try:
            process = subprocess.run(
                [self.executable, formula],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError:
            raise FormulaCheckerError(f"{self.executable} not found. Is texvccheck installed?")
        except subprocess.TimeoutExpired:
            raise FormulaCheckerError(
                f"{self.executable} did not finish within {self.timeout}s"
            )

        stderr = (process.stderr or "").strip()
        if stderr:
            logger.warning(f"texvccheck stderr: {stderr}")

        # A status line is a verdict even if the exit code is not 0
        if process.returncode != 0 and not process.stdout:
            raise FormulaCheckerError(
                f"{self.executable} exited with code {process.returncode}: "
                f"{stderr or 'No stderr'}"
            )

        result = parse_texvc_output(process.stdout)
        if not isinstance(result, TexOk):
            logger.debug(f"Formula rejected ({result.type}): {formula}")
        self._cache[formula] = result
        return result
