# mfnf/elements.py
"""
Document tree types as produced by the wiki markup parser.

The parser itself is an external tool; it serializes its syntax tree to JSON
where every element is an object with a lowercase ``type`` tag, a
``position`` span and kind-specific fields. These dataclasses mirror that
shape so the rest of the package can work on plain Python objects.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Callable, Iterator, Literal, get_args


# -----------------------------------------------------------------------------
# Positions
# -----------------------------------------------------------------------------


@dataclass
class Position:
    """A location in the source text."""

    offset: int = 0
    line: int = 1
    col: int = 1


@dataclass
class Span:
    """Start and end location of an element in the source text."""

    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)


@dataclass
class TagAttribute:
    """A key="value" attribute of a table, html tag or gallery."""

    key: str = ""
    value: str = ""
    position: Span = field(default_factory=Span)


MarkupType = Literal[
    "nowiki",
    "bold",
    "italic",
    "math",
    "strikethrough",
    "underline",
    "code",
    "blockquote",
    "preformatted",
]

ListItemKind = Literal["unordered", "ordered", "definition", "definitionterm"]


# -----------------------------------------------------------------------------
# Elements
# -----------------------------------------------------------------------------


@dataclass
class Document:
    """Root of a parsed document."""

    content: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class Heading:
    """A section heading with its caption and the section content."""

    depth: int = 1
    caption: list[Element] = field(default_factory=list)
    content: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class Text:
    """Plain text."""

    text: str = ""
    position: Span = field(default_factory=Span)


@dataclass
class Formatted:
    """Text with inline markup (bold, italic, <math>, ...)."""

    markup: MarkupType = "bold"
    content: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class Paragraph:
    content: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class Template:
    """A template invocation: {{name|arg=value|...}}."""

    name: list[Element] = field(default_factory=list)
    content: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class TemplateArgument:
    """A named argument of a template invocation."""

    name: str = ""
    value: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class InternalReference:
    """A wiki link or file embedding: [[target|option|...|caption]]."""

    target: list[Element] = field(default_factory=list)
    options: list[list[Element]] = field(default_factory=list)
    caption: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class ExternalReference:
    target: str = ""
    caption: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class ListItem:
    kind: ListItemKind = "unordered"
    depth: int = 1
    content: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class List:
    content: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class Table:
    attributes: list[TagAttribute] = field(default_factory=list)
    caption: list[Element] = field(default_factory=list)
    caption_attributes: list[TagAttribute] = field(default_factory=list)
    rows: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class TableRow:
    attributes: list[TagAttribute] = field(default_factory=list)
    cells: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class TableCell:
    header: bool = False
    attributes: list[TagAttribute] = field(default_factory=list)
    content: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class Comment:
    text: str = ""
    position: Span = field(default_factory=Span)


@dataclass
class HtmlTag:
    name: str = ""
    attributes: list[TagAttribute] = field(default_factory=list)
    content: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class Gallery:
    attributes: list[TagAttribute] = field(default_factory=list)
    content: list[Element] = field(default_factory=list)
    position: Span = field(default_factory=Span)


@dataclass
class Error:
    """Marks a part of the tree that could not be processed."""

    message: str = ""
    position: Span = field(default_factory=Span)


Element = (
    Document
    | Heading
    | Text
    | Formatted
    | Paragraph
    | Template
    | TemplateArgument
    | InternalReference
    | ExternalReference
    | ListItem
    | List
    | Table
    | TableRow
    | TableCell
    | Comment
    | HtmlTag
    | Gallery
    | Error
)


# Fields holding child element lists, in document order.
# InternalReference.options is a list of lists and handled separately.
CHILD_FIELDS: dict[type, tuple[str, ...]] = {
    Document: ("content",),
    Heading: ("caption", "content"),
    Text: (),
    Formatted: ("content",),
    Paragraph: ("content",),
    Template: ("name", "content"),
    TemplateArgument: ("value",),
    InternalReference: ("target", "options", "caption"),
    ExternalReference: ("caption",),
    ListItem: ("content",),
    List: ("content",),
    Table: ("caption", "rows"),
    TableRow: ("cells",),
    TableCell: ("content",),
    Comment: (),
    HtmlTag: ("content",),
    Gallery: ("content",),
    Error: (),
}

ELEMENT_TYPES: dict[str, type] = {cls.__name__.lower(): cls for cls in CHILD_FIELDS}


# -----------------------------------------------------------------------------
# Traversal
# -----------------------------------------------------------------------------


def child_lists(element: Element) -> list[list[Element]]:
    """Return every child node-list of an element, in document order."""
    result = []
    for name in CHILD_FIELDS[type(element)]:
        value = getattr(element, name)
        if name == "options":
            result.extend(value)
        else:
            result.append(value)
    return result


def replace_children(
    element: Element, func: Callable[[list[Element]], list[Element]]
) -> Element:
    """
    Return a copy of ``element`` with every child list mapped through ``func``.

    The original element is left untouched.
    """
    changes = {}
    for name in CHILD_FIELDS[type(element)]:
        value = getattr(element, name)
        if name == "options":
            changes[name] = [func(option) for option in value]
        else:
            changes[name] = func(value)
    if not changes:
        return element
    return replace(element, **changes)


def iter_elements(nodes: list[Element]) -> Iterator[Element]:
    """Yield every element of a subtree, depth-first in document order."""
    for node in nodes:
        yield node
        for children in child_lists(node):
            yield from iter_elements(children)


# -----------------------------------------------------------------------------
# JSON (de)serialization
# -----------------------------------------------------------------------------


def _position_from_dict(data: dict | None) -> Position:
    if not data:
        return Position()
    if not isinstance(data, dict):
        raise ValueError(f"Position must be an object, got {type(data).__name__}")
    return Position(
        offset=data.get("offset", 0), line=data.get("line", 1), col=data.get("col", 1)
    )


def _span_from_dict(data: dict | None) -> Span:
    if not data:
        return Span()
    if not isinstance(data, dict):
        raise ValueError(f"Span must be an object, got {type(data).__name__}")
    return Span(
        start=_position_from_dict(data.get("start")),
        end=_position_from_dict(data.get("end")),
    )


def _span_to_dict(span: Span) -> dict:
    return {
        "start": {"offset": span.start.offset, "line": span.start.line, "col": span.start.col},
        "end": {"offset": span.end.offset, "line": span.end.line, "col": span.end.col},
    }


def _attribute_from_dict(data: dict) -> TagAttribute:
    if not isinstance(data, dict):
        raise ValueError(f"Tag attribute must be an object, got {type(data).__name__}")
    return TagAttribute(
        key=data.get("key", ""),
        value=data.get("value", ""),
        position=_span_from_dict(data.get("position")),
    )


def _child_list(value: Any, name: str) -> list:
    if not isinstance(value, list):
        raise ValueError(f"Field {name!r} must be a list, got {type(value).__name__}")
    return value


def element_from_dict(data: dict[str, Any]) -> Element:
    """
    Build an element from the parser's JSON representation.

    Raises:
        ValueError: If the data is not an element object, or the ``type`` tag
            or an enum value is unknown
    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected an element object, got {type(data).__name__}")
    type_name = str(data.get("type", "")).lower()
    cls = ELEMENT_TYPES.get(type_name)
    if cls is None:
        raise ValueError(f"Unknown element type: {data.get('type')!r}")

    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in data:
            continue
        value = data[f.name]
        if f.name == "position":
            kwargs[f.name] = _span_from_dict(value)
        elif f.name == "options":
            kwargs[f.name] = [
                [element_from_dict(e) for e in _child_list(option, f.name)]
                for option in _child_list(value, f.name)
            ]
        elif f.name in CHILD_FIELDS[cls]:
            kwargs[f.name] = [element_from_dict(e) for e in _child_list(value, f.name)]
        elif f.name in ("attributes", "caption_attributes"):
            kwargs[f.name] = [_attribute_from_dict(a) for a in _child_list(value or [], f.name)]
        elif f.name == "markup":
            value = str(value).lower()
            if value not in get_args(MarkupType):
                raise ValueError(f"Unknown markup type: {data[f.name]!r}")
            kwargs[f.name] = value
        elif f.name == "kind":
            value = str(value).lower()
            if value not in get_args(ListItemKind):
                raise ValueError(f"Unknown list item kind: {data[f.name]!r}")
            kwargs[f.name] = value
        else:
            kwargs[f.name] = value
    return cls(**kwargs)


def element_to_dict(element: Element) -> dict[str, Any]:
    """Serialize an element to the parser's JSON representation."""
    result: dict[str, Any] = {"type": type(element).__name__.lower()}
    for f in fields(element):
        value = getattr(element, f.name)
        if f.name == "position":
            result[f.name] = _span_to_dict(value)
        elif f.name == "options":
            result[f.name] = [[element_to_dict(e) for e in option] for option in value]
        elif f.name in CHILD_FIELDS[type(element)]:
            result[f.name] = [element_to_dict(e) for e in value]
        elif f.name in ("attributes", "caption_attributes"):
            result[f.name] = [
                {"key": a.key, "value": a.value, "position": _span_to_dict(a.position)}
                for a in value
            ]
        else:
            result[f.name] = value
    return result


def load_document(path: Path | str) -> Element:
    """Load a JSON-serialized document tree from disk."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        return element_from_dict(json.load(f))
