# mfnf/util.py
"""Helpers for reading text and arguments out of the document tree."""

from mfnf.elements import Element, Formatted, Paragraph, Text, TemplateArgument


def extract_plain_text(content: list[Element]) -> str:
    """
    Concatenate the text of a list of elements.

    Text, Formatted, Paragraph and TemplateArgument nodes are followed
    recursively; every other element kind contributes nothing.
    """
    parts = []
    for element in content:
        if isinstance(element, Text):
            parts.append(element.text)
        elif isinstance(element, (Formatted, Paragraph)):
            parts.append(extract_plain_text(element.content))
        elif isinstance(element, TemplateArgument):
            parts.append(extract_plain_text(element.value))
    return "".join(parts)


def find_arg(content: list[Element], names: str | list[str]) -> TemplateArgument | None:
    """
    Return the first template argument whose name matches one of ``names``.

    Names are compared trimmed and case-insensitive.
    """
    if isinstance(names, str):
        names = [names]
    wanted = {n.strip().lower() for n in names}
    for child in content:
        if isinstance(child, TemplateArgument) and child.name.strip().lower() in wanted:
            return child
    return None
