"""Rewrite passes over the document tree."""

from .lists import convert_template_list
from .formulas import normalize_math_formulas, check_formula
from .texvc import (
    FormulaChecker,
    FormulaCheckerError,
    TexvcChecker,
    TexResult,
    TexOk,
    TexUnknownFunction,
    TexSyntaxError,
    TexLexingError,
    TexUnknownError,
    parse_texvc_output,
)

__all__ = [
    "convert_template_list",
    "normalize_math_formulas",
    "check_formula",
    # Formula checker
    "FormulaChecker",
    "FormulaCheckerError",
    "TexvcChecker",
    "TexResult",
    "TexOk",
    "TexUnknownFunction",
    "TexSyntaxError",
    "TexLexingError",
    "TexUnknownError",
    "parse_texvc_output",
]
