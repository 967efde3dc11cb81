# mfnf/validator.py
"""
Validate the templates of parsed documents against the template specification.

Every template invocation must be known to the registry, provide all
required attributes, and each attribute value must satisfy the predicate
its specification names.

Usage:
    python -m mfnf.validator path/to/documents/
    python -m mfnf.validator --dump-spec

Or import directly:
    from mfnf.validator import validate_templates, validate_document_file
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

from mfnf.elements import Element, Template, iter_elements, load_document
from mfnf.spec.loader import load_definitions
from mfnf.spec.matcher import match_template
from mfnf.spec.registry import compile_spec, export_specs, set_registry
from mfnf.util import extract_plain_text


@dataclass
class ValidationError:
    """A single validation error."""

    message: str
    line: int | None = None  # Line number if applicable
    context: str | None = None  # Template the error belongs to

    def __str__(self) -> str:
        parts = []
        if self.line is not None:
            parts.append(f"line {self.line}")
        if self.context:
            parts.append(self.context)
        location = ", ".join(parts)
        if location:
            return f"{location}: {self.message}"
        return self.message


@dataclass
class ValidationResult:
    """Result of validating a file."""

    path: Path | None = None
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def __str__(self) -> str:
        if self.is_valid:
            return f"{self.path}: OK" if self.path else "OK"
        prefix = f"{self.path}: " if self.path else ""
        error_strs = [f"  - {e}" for e in self.errors]
        return f"{prefix}{len(self.errors)} error(s)\n" + "\n".join(error_strs)


def _line_of(element: Element | None) -> int | None:
    if element is None:
        return None
    return element.position.start.line


def validate_template(template: Template) -> list[ValidationError]:
    """
    Validate a single template invocation (not its nested templates).

    Templates are matched and their attribute predicates evaluated against
    the process-wide registry, so both always see the same catalog.
    """
    name = extract_plain_text(template.name).strip()
    context = "{{" + name + "}}"
    line = _line_of(template)

    outcome = match_template(name, template.content)
    if outcome.status == "unknown":
        return [ValidationError(f'"{name}" has no specification!', line, context)]
    if outcome.status == "missing_required":
        missing = ", ".join(
            outcome.spec.attribute(identifier).default_name()
            for identifier in outcome.missing
        )
        return [
            ValidationError(f"Missing required attribute(s): {missing}", line, context)
        ]

    errors = []
    for attribute in outcome.template.present:
        attribute_spec = outcome.spec.attribute(attribute.name)
        failure = attribute_spec.predicate(attribute.value)
        if failure is None:
            continue
        errors.append(
            ValidationError(
                f"{outcome.spec.default_name()}/{attribute_spec.default_name()} "
                f"({attribute_spec.predicate_name}): {failure.cause}",
                _line_of(failure.tree) or line,
                context,
            )
        )
    return errors


def validate_templates(nodes: list[Element]) -> list[ValidationError]:
    """
    Validate every template in a tree, in document order.

    Nested templates are included. Use set_registry() to validate against
    a catalog other than the configured one.
    """
    errors: list[ValidationError] = []
    for element in iter_elements(nodes):
        if isinstance(element, Template):
            errors.extend(validate_template(element))
    return errors


def validate_document_file(path: Path | str) -> ValidationResult:
    """Validate a JSON-serialized document tree."""
    path = Path(path)
    try:
        root = load_document(path)
    except ValueError as e:
        return ValidationResult(
            path=path, errors=[ValidationError(f"Cannot read document: {e}")]
        )
    return ValidationResult(path=path, errors=validate_templates([root]))


def validate_directory(directory: Path | str, glob: str = "**/*.json") -> list[ValidationResult]:
    """Validate all document trees below a directory."""
    directory = Path(directory)
    return [validate_document_file(p) for p in sorted(directory.glob(glob))]


def _collect_results(paths: list[Path], glob: str) -> list[ValidationResult]:
    results: list[ValidationResult] = []
    for path in paths:
        if path.is_dir():
            results.extend(validate_directory(path, glob=glob))
        elif path.is_file():
            results.append(validate_document_file(path))
        else:
            results.append(
                ValidationResult(path=path, errors=[ValidationError(f"Path not found: {path}")])
            )
    return results


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Validate templates of parsed wiki documents",
        prog="python -m mfnf.validator",
    )
    parser.add_argument(
        "paths", nargs="*", type=Path, help="JSON document trees or directories"
    )
    parser.add_argument(
        "--spec", type=Path, help="Template specification (default: MFNF_TEMPLATE_SPEC)"
    )
    parser.add_argument("--glob", default="**/*.json", help="Document pattern in directories")
    parser.add_argument(
        "--dump-spec",
        action="store_true",
        help="Print the compiled template catalog as YAML and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Also list valid files")

    args = parser.parse_args(argv)

    if args.spec is not None:
        set_registry(compile_spec(load_definitions(args.spec)))

    if args.dump_spec:
        print(yaml.safe_dump(export_specs(), allow_unicode=True, sort_keys=False), end="")
        return 0
    if not args.paths:
        parser.error("at least one path is required")

    results = _collect_results(args.paths, args.glob)
    invalid = [r for r in results if not r.is_valid]
    for result in results:
        if args.verbose or not result.is_valid:
            print(result)

    print(
        f"\nValidated {len(results)} file(s): "
        f"{len(results) - len(invalid)} valid, {len(invalid)} invalid"
    )
    return 1 if invalid else 0


if __name__ == "__main__":
    sys.exit(main())
