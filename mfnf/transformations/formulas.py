# mfnf/transformations/formulas.py
"""Check and normalize <math> formulas with a formula checker."""

from dataclasses import replace

from mfnf.elements import Element, Error, Formatted, Span, Text, replace_children
from mfnf.transformations.texvc import (
    FormulaChecker,
    TexLexingError,
    TexOk,
    TexSyntaxError,
    TexUnknownFunction,
)


def normalize_math_formulas(root: Element, checker: FormulaChecker) -> Element:
    """
    Replace the content of every math tag by its normalized form.

    Math tags that are not exactly one text element, or whose formula is
    rejected by the checker, are replaced by an Error element.
    """
    root = replace_children(
        root, lambda elements: [normalize_math_formulas(e, checker) for e in elements]
    )
    if isinstance(root, Formatted) and root.markup == "math":
        checked = check_formula(root.content, root.position, checker)
        if isinstance(checked, Error):
            return checked
        return replace(root, content=[checked])
    return root


def check_formula(
    content: list[Element], position: Span, checker: FormulaChecker
) -> Text | Error:
    """Check a formula, return its normalized text or an error."""
    if len(content) != 1:
        return Error(
            message="A formula must have exactly one content element!",
            position=position,
        )
    if not isinstance(content[0], Text):
        return Error(message="A formula must only have text as content!", position=position)

    result = checker.check(content[0].text)
    if isinstance(result, TexOk):
        return Text(text=result.text, position=position)

    if isinstance(result, TexUnknownFunction):
        message = f"unknown latex function `{result.name}`!"
    elif isinstance(result, TexSyntaxError):
        message = "latex syntax error!"
    elif isinstance(result, TexLexingError):
        message = "latex lexer error!"
    else:
        message = "unknown latex error!"
    return Error(message=message, position=position)
