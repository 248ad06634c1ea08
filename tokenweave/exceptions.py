"""
Custom exception hierarchy for tokenweave.

Provides structured exception types for different error categories,
enabling better error handling and debugging.
"""


class TokenweaveError(Exception):
    """Base exception for all tokenweave errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Token Tree Exceptions
# =============================================================================


class TokenTreeError(TokenweaveError):
    """Base exception for token tree errors."""
    pass


class InvalidTokenDocumentError(TokenTreeError):
    """Raised when a token document is not a JSON object."""

    def __init__(self, reason: str, source: str | None = None):
        details = {"reason": reason}
        if source:
            details["source"] = source
        super().__init__(f"Invalid token document: {reason}", details=details)
        self.source = source


class DuplicateTokenPathError(TokenTreeError):
    """Raised when two tokens in one tree derive the same path."""

    def __init__(self, path: str):
        super().__init__(
            f"Duplicate token path '{path}'",
            details={"path": path},
        )
        self.path = path


class DuplicatePropertyNameError(TokenTreeError):
    """Raised when two token paths map to the same generated identifier."""

    def __init__(self, category: str, property_name: str, first_path: str, second_path: str):
        super().__init__(
            f"Tokens '{first_path}' and '{second_path}' both generate "
            f"'{property_name}' in category '{category}'",
            details={
                "category": category,
                "property_name": property_name,
                "paths": [first_path, second_path],
            },
        )
        self.category = category
        self.property_name = property_name
        self.paths = (first_path, second_path)


# =============================================================================
# Reference Exceptions
# =============================================================================


class TokenReferenceError(TokenweaveError):
    """Base exception for reference resolution errors."""
    pass


class ReferenceScopeMismatchError(TokenReferenceError):
    """Raised when a placeholder names a scope other than the one supplied."""

    def __init__(self, reference: str, expected_scope: str, actual_scope: str):
        super().__init__(
            f"Reference '{reference}' points at scope '{actual_scope}', "
            f"but resolution scope is '{expected_scope}'",
            details={
                "reference": reference,
                "expected_scope": expected_scope,
                "actual_scope": actual_scope,
            },
        )
        self.reference = reference
        self.expected_scope = expected_scope
        self.actual_scope = actual_scope


# =============================================================================
# Validation Exceptions
# =============================================================================


class TokenValidationError(TokenweaveError):
    """Raised when a token document fails structure validation."""

    def __init__(self, issues: list):
        count = len(issues)
        super().__init__(
            f"Token document failed validation with {count} issue{'s' if count != 1 else ''}",
            details={"issues": [str(issue) for issue in issues]},
        )
        self.issues = issues


# =============================================================================
# Version Exceptions
# =============================================================================


class VersionError(TokenweaveError):
    """Base exception for package version errors."""
    pass


class InvalidVersionError(VersionError):
    """Raised when a version string is not MAJOR.MINOR.PATCH."""

    def __init__(self, version: str):
        super().__init__(
            f"Invalid version format '{version}'. Must be MAJOR.MINOR.PATCH (e.g., 1.0.0)",
            details={"version": version},
        )
        self.version = version


class VersionMismatchError(VersionError):
    """Raised when the npm and NuGet manifests disagree."""

    def __init__(self, npm_version: str | None, nuget_version: str | None):
        super().__init__(
            f"Version mismatch detected (npm: {npm_version}, NuGet: {nuget_version})",
            details={"npm": npm_version, "nuget": nuget_version},
        )
        self.npm_version = npm_version
        self.nuget_version = nuget_version


class ManifestError(VersionError):
    """Raised when a package manifest cannot be read or updated."""

    def __init__(self, path: str, cause: str):
        super().__init__(
            f"Manifest error for {path}: {cause}",
            details={"path": path, "cause": cause},
        )
        self.path = path


# =============================================================================
# Build Exceptions
# =============================================================================


class BuildError(TokenweaveError):
    """Base exception for build driver errors."""
    pass


class TokenFileError(BuildError):
    """Raised when the token source file cannot be loaded."""

    def __init__(self, path: str, cause: str):
        super().__init__(
            f"Cannot load tokens from {path}: {cause}",
            details={"path": path, "cause": cause},
        )
        self.path = path


class OutputWriteError(BuildError):
    """Raised when a generated file cannot be written."""

    def __init__(self, path: str, cause: str):
        super().__init__(
            f"Failed to write {path}: {cause}",
            details={"path": path, "cause": cause},
        )
        self.path = path
