# mfnf/transformations/tests/test_formulas.py
"""Tests for math formula normalization."""

import pytest

from mfnf.elements import (
    Document,
    Error,
    Formatted,
    Paragraph,
    Position,
    Span,
    Text,
)
from mfnf.transformations.formulas import normalize_math_formulas
from mfnf.transformations.texvc import (
    FormulaCheckerError,
    TexLexingError,
    TexOk,
    TexSyntaxError,
    TexUnknownError,
    TexUnknownFunction,
)


class FakeChecker:
    """Formula checker returning canned results."""

    def __init__(self, results=None):
        self.results = results or {}
        self.calls: list[str] = []

    def check(self, formula):
        self.calls.append(formula)
        return self.results.get(formula, TexOk(text=formula.strip()))


class FailingChecker:
    def check(self, formula):
        raise FormulaCheckerError("texvccheck not found")


SPAN = Span(start=Position(offset=4, line=1, col=5), end=Position(offset=20, line=1, col=21))


def math(*content) -> Formatted:
    return Formatted(markup="math", content=list(content), position=SPAN)


class TestNormalizeMathFormulas:
    """Test normalize_math_formulas."""

    def test_formula_is_normalized(self):
        checker = FakeChecker({"x^2 ": TexOk(text="x^{2}")})
        result = normalize_math_formulas(math(Text("x^2 ")), checker)

        assert result == Formatted(
            markup="math", content=[Text("x^{2}", position=SPAN)], position=SPAN
        )
        assert checker.calls == ["x^2 "]

    def test_two_content_elements(self):
        checker = FakeChecker()
        result = normalize_math_formulas(math(Text("a"), Text("b")), checker)

        assert result == Error(
            message="A formula must have exactly one content element!", position=SPAN
        )
        assert checker.calls == []

    def test_empty_formula(self):
        result = normalize_math_formulas(math(), FakeChecker())
        assert result.message == "A formula must have exactly one content element!"

    def test_non_text_content(self):
        checker = FakeChecker()
        bold = Formatted(markup="bold", content=[Text("x")])
        result = normalize_math_formulas(math(bold), checker)

        assert result == Error(
            message="A formula must only have text as content!", position=SPAN
        )
        assert checker.calls == []

    @pytest.mark.parametrize(
        "checked, message",
        [
            (TexUnknownFunction(name="\\foo"), "unknown latex function `\\foo`!"),
            (TexSyntaxError(), "latex syntax error!"),
            (TexLexingError(), "latex lexer error!"),
            (TexUnknownError(), "unknown latex error!"),
        ],
    )
    def test_rejected_formula(self, checked, message):
        checker = FakeChecker({"bad": checked})
        result = normalize_math_formulas(math(Text("bad")), checker)
        assert result == Error(message=message, position=SPAN)

    def test_other_markup_is_kept(self):
        checker = FakeChecker()
        italic = Formatted(markup="italic", content=[Text("a"), Text("b")])
        assert normalize_math_formulas(italic, checker) == italic
        assert checker.calls == []

    def test_nested_formulas(self):
        checker = FakeChecker({"b": TexSyntaxError()})
        document = Document(
            content=[
                Paragraph([Text("Sei "), math(Text("a")), Text(" und "), math(Text("b"))]),
            ]
        )
        result = normalize_math_formulas(document, checker)

        paragraph = result.content[0]
        assert paragraph.content[0] == Text("Sei ")
        assert paragraph.content[1].content == [Text("a", position=SPAN)]
        assert paragraph.content[3] == Error(message="latex syntax error!", position=SPAN)
        assert checker.calls == ["a", "b"]

    def test_input_is_not_modified(self):
        formula = math(Text("x"))
        document = Document(content=[formula])
        normalize_math_formulas(document, FakeChecker({"x": TexSyntaxError()}))
        assert document.content == [formula]
        assert formula.content == [Text("x")]

    def test_checker_errors_propagate(self):
        with pytest.raises(FormulaCheckerError):
            normalize_math_formulas(Document(content=[math(Text("x"))]), FailingChecker())
