# mfnf/transformations/lists.py
"""Convert list templates ({{Liste|item1=...|item2=...}}) to wiki lists."""

from mfnf.elements import (
    Element,
    List,
    ListItem,
    Template,
    TemplateArgument,
    replace_children,
)
from mfnf.util import extract_plain_text, find_arg

LIST_TEMPLATE_NAMES = {"list", "liste"}

ORDERED_LIST_TYPES = {"ol", "ordered"}


def convert_template_list(root: Element) -> Element:
    """
    Replace every list template in the tree by a List element.

    Children are converted first. A template that only wraps a sublist
    (an argument named list...) is replaced by that sublist.
    """
    root = replace_children(root, _convert_all)
    if isinstance(root, Template):
        name = extract_plain_text(root.name).strip().lower()
        if name in LIST_TEMPLATE_NAMES:
            return _template_to_list(root)
    return root


def _convert_all(elements: list[Element]) -> list[Element]:
    return [convert_template_list(element) for element in elements]


def _template_to_list(template: Template) -> Element:
    type_arg = find_arg(template.content, ["type", "typ"])
    list_type = extract_plain_text(type_arg.value) if type_arg is not None else ""
    kind = "ordered" if list_type.strip().lower() in ORDERED_LIST_TYPES else "unordered"

    items: list[Element] = []
    for arg in template.content:
        if not isinstance(arg, TemplateArgument):
            continue
        arg_name = arg.name.strip().lower()
        if arg_name.startswith("item"):
            items.append(
                ListItem(kind=kind, depth=1, content=arg.value, position=arg.position)
            )
        elif arg_name.startswith("list"):
            if not arg.value:
                continue
            # The template only wraps a list, use that list directly
            return arg.value[0]

    return List(content=items, position=template.position)
