"""Template specification package."""

from .types import (
    Attribute,
    AttributeDefinition,
    AttributeSpec,
    Format,
    KnownTemplate,
    PredError,
    Predicate,
    PredResult,
    Priority,
    SpecError,
    TemplateDefinition,
    TemplateSpec,
)
from .registry import (
    Registry,
    compile_spec,
    get_registry,
    set_registry,
    clear_registry,
    all_specs,
    spec_by_name,
    export_specs,
)
from .matcher import (
    MatchOutcome,
    match_template,
    parse_template,
    parse_template_node,
)
from .predicates import (
    PREDICATES,
    check_always,
    everything_is_allowed,
    is_math_tag,
    is_plain_text,
    is_negative_switch,
    is_navigation_spec,
    is_theorem_paragraph,
    is_text_only_paragraph,
)
from .loader import load_definitions, definitions_from_records

__all__ = [
    # Types
    "Attribute",
    "AttributeDefinition",
    "AttributeSpec",
    "Format",
    "KnownTemplate",
    "PredError",
    "Predicate",
    "PredResult",
    "Priority",
    "SpecError",
    "TemplateDefinition",
    "TemplateSpec",
    # Registry
    "Registry",
    "compile_spec",
    "get_registry",
    "set_registry",
    "clear_registry",
    "all_specs",
    "spec_by_name",
    "export_specs",
    # Matching
    "MatchOutcome",
    "match_template",
    "parse_template",
    "parse_template_node",
    # Predicates
    "PREDICATES",
    "check_always",
    "everything_is_allowed",
    "is_math_tag",
    "is_plain_text",
    "is_negative_switch",
    "is_navigation_spec",
    "is_theorem_paragraph",
    "is_text_only_paragraph",
    # Loading
    "load_definitions",
    "definitions_from_records",
]
