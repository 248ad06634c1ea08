"""
Token Document Validation - structure contract checks.

Checks a layered token document before it is compiled:
- ``core.<product>`` exists with ``source`` and ``theme``
- every source color has a string ``value`` and ``type == "color"``
- source color values have a recognized color format shape
- theme has ``light`` and ``dark`` variants exposing the same color keys
- theme placeholders use ``{core.<product>.source.color.<name>}``

Only the format shape of colors is checked, never their correctness.

Usage:
    report = validate_document(document, product="ivy-framework")
    if not report:
        for issue in report.issues:
            print(issue)
    report.raise_for_issues()
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from .exceptions import TokenValidationError
from .references import parse_reference

COLOR_FORMATS = (
    re.compile(r"^#[0-9A-Fa-f]{6}$"),
    re.compile(r"^rgb\("),
    re.compile(r"^rgba\("),
    re.compile(r"^hsl\("),
    re.compile(r"^hsla\("),
    re.compile(r"^oklch\("),
)


class IssueSeverity(Enum):
    """How serious a validation issue is."""
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ValidationIssue:
    """A single contract violation."""
    path: str
    message: str
    severity: IssueSeverity = IssueSeverity.ERROR

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class ValidationReport:
    """Result of validating a document."""
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == IssueSeverity.ERROR]

    @property
    def valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.valid

    def add(self, path: str, message: str, severity: IssueSeverity = IssueSeverity.ERROR):
        self.issues.append(ValidationIssue(path, message, severity))
        return self

    def raise_for_issues(self) -> None:
        """Raise TokenValidationError if any error-level issue was found."""
        if self.errors:
            raise TokenValidationError(self.errors)


def is_placeholder_shape(value: str) -> bool:
    """Check for a ``{...}`` wrapped value."""
    return value.startswith("{") and value.endswith("}")


def is_color_format(value: str) -> bool:
    """Check that a literal color has a supported format shape."""
    return any(pattern.match(value) for pattern in COLOR_FORMATS)


def _check_source_colors(colors: Mapping[str, Any], base: str, report: ValidationReport) -> None:
    literal_count = 0
    for key, token in colors.items():
        path = f"{base}.{key}"
        if not isinstance(token, Mapping) or "value" not in token or "type" not in token:
            report.add(path, "source color must have 'value' and 'type'")
            continue
        value = token["value"]
        if token["type"] != "color":
            report.add(path, f"expected type 'color', got {token['type']!r}")
        if not isinstance(value, str):
            report.add(path, "value must be a string")
            continue
        if is_placeholder_shape(value):
            continue
        literal_count += 1
        if not is_color_format(value):
            report.add(path, f"unrecognized color format {value!r}")
    if colors and literal_count == 0:
        report.add(base, "source defines no literal color values", IssueSeverity.WARNING)


def _check_theme_colors(
    colors: Mapping[str, Any],
    base: str,
    product: str,
    report: ValidationReport,
) -> None:
    for key, token in colors.items():
        path = f"{base}.{key}"
        if not isinstance(token, Mapping) or "value" not in token or "type" not in token:
            report.add(path, "theme color must have 'value' and 'type'")
            continue
        value = token["value"]
        if not isinstance(value, str):
            report.add(path, "value must be a string")
            continue
        if not is_placeholder_shape(value):
            continue
        reference = parse_reference(value)
        if reference is None or reference.scope_id != f"core.{product}":
            report.add(
                path,
                f"reference {value!r} must match {{core.{product}.source.color.<name>}}",
            )


def validate_document(document: Mapping[str, Any], product: str = "ivy-framework") -> ValidationReport:
    """
    Validate the layered document layout for one product.

    Args:
        document: Parsed JSON token document
        product: Product key under ``core``

    Returns:
        ValidationReport listing every issue found
    """
    report = ValidationReport()
    core = document.get("core")
    if not isinstance(core, Mapping):
        return report.add("core", "missing top-level 'core' group")
    scope = core.get(product)
    if not isinstance(scope, Mapping):
        return report.add(f"core.{product}", "missing product scope")

    source = scope.get("source")
    if not isinstance(source, Mapping):
        report.add(f"core.{product}.source", "missing 'source' group")
    elif not isinstance(source.get("color"), Mapping):
        report.add(f"core.{product}.source.color", "missing source colors")
    else:
        _check_source_colors(source["color"], f"core.{product}.source.color", report)

    theme = scope.get("theme")
    if not isinstance(theme, Mapping):
        return report.add(f"core.{product}.theme", "missing 'theme' group")

    variant_keys: dict[str, set[str]] = {}
    for variant in ("light", "dark"):
        base = f"core.{product}.theme.{variant}"
        body = theme.get(variant)
        if not isinstance(body, Mapping):
            report.add(base, f"missing '{variant}' variant")
            continue
        colors = body.get("color")
        if not isinstance(colors, Mapping):
            report.add(f"{base}.color", "missing theme colors")
            continue
        variant_keys[variant] = set(colors)
        _check_theme_colors(colors, f"{base}.color", product, report)

    if len(variant_keys) == 2 and variant_keys["light"] != variant_keys["dark"]:
        difference = sorted(variant_keys["light"] ^ variant_keys["dark"])
        report.add(
            f"core.{product}.theme",
            f"light and dark color keys differ: {', '.join(difference)}",
        )
    return report
