"""
Template specification and checks for "Mathe für Nicht-Freaks" wiki documents.
Works on document trees produced by the wiki markup parser.
"""

# Template specification
from .spec import (
    KnownTemplate,
    PredError,
    SpecError,
    TemplateSpec,
    AttributeSpec,
    all_specs,
    spec_by_name,
    parse_template,
    match_template,
    check_always,
)

# Tree utilities
from .util import extract_plain_text, find_arg

# Transformations
from .transformations import convert_template_list, normalize_math_formulas, TexvcChecker

__all__ = [
    # Specification
    "KnownTemplate",
    "PredError",
    "SpecError",
    "TemplateSpec",
    "AttributeSpec",
    "all_specs",
    "spec_by_name",
    "parse_template",
    "match_template",
    "check_always",
    # Tree utilities
    "extract_plain_text",
    "find_arg",
    # Transformations
    "convert_template_list",
    "normalize_math_formulas",
    "TexvcChecker",
]
