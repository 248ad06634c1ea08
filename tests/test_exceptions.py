"""Tests for custom exception hierarchy."""

import pytest
from tokenweave.exceptions import (
    TokenweaveError,
    TokenTreeError,
    InvalidTokenDocumentError,
    DuplicateTokenPathError,
    DuplicatePropertyNameError,
    TokenReferenceError,
    ReferenceScopeMismatchError,
    TokenValidationError,
    VersionError,
    InvalidVersionError,
    VersionMismatchError,
    ManifestError,
    BuildError,
    TokenFileError,
    OutputWriteError,
)


class TestTokenweaveError:
    """Tests for base exception class."""

    def test_basic_instantiation(self):
        """Test basic exception creation."""
        error = TokenweaveError("Test error")
        assert str(error) == "Test error"
        assert error.message == "Test error"
        assert error.details == {}

    def test_with_details(self):
        """Test exception with details dict."""
        error = TokenweaveError("Error occurred", details={"key": "value", "count": 42})
        assert error.message == "Error occurred"
        assert error.details == {"key": "value", "count": 42}

    def test_is_exception(self):
        """Test that it's a proper Exception subclass."""
        error = TokenweaveError("Test")
        assert isinstance(error, Exception)

        with pytest.raises(TokenweaveError):
            raise error

    def test_str_with_details(self):
        """Test string representation includes details."""
        error = TokenweaveError("Test error", details={"x": 1})
        assert str(error) == "Test error | Details: {'x': 1}"


class TestTreeExceptions:
    """Tests for token tree exceptions."""

    def test_invalid_document(self):
        error = InvalidTokenDocumentError("expected a JSON object, got list", source="a.json")
        assert isinstance(error, TokenTreeError)
        assert error.source == "a.json"
        assert error.details == {"reason": "expected a JSON object, got list", "source": "a.json"}

    def test_invalid_document_without_source(self):
        error = InvalidTokenDocumentError("bad")
        assert "source" not in error.details

    def test_duplicate_path(self):
        error = DuplicateTokenPathError("color-a-b")
        assert isinstance(error, TokenTreeError)
        assert error.path == "color-a-b"
        assert "color-a-b" in str(error)

    def test_duplicate_property_name(self):
        error = DuplicatePropertyNameError("color", "PrimaryForeground", "color-primary-foreground", "color-primaryForeground")
        assert isinstance(error, TokenTreeError)
        assert error.paths == ("color-primary-foreground", "color-primaryForeground")
        assert error.details["category"] == "color"


class TestReferenceExceptions:
    """Tests for reference resolution exceptions."""

    def test_scope_mismatch(self):
        error = ReferenceScopeMismatchError("{b.source.color.x}", "a", "b")
        assert isinstance(error, TokenReferenceError)
        assert isinstance(error, TokenweaveError)
        assert error.reference == "{b.source.color.x}"
        assert "scope 'b'" in error.message
        assert "resolution scope is 'a'" in error.message


class TestValidationExceptions:
    """Tests for validation exceptions."""

    def test_issue_count(self):
        assert "1 issue" in TokenValidationError(["a"]).message
        assert "2 issues" in TokenValidationError(["a", "b"]).message

    def test_issues_kept(self):
        error = TokenValidationError(["core: missing"])
        assert error.issues == ["core: missing"]
        assert error.details["issues"] == ["core: missing"]


class TestVersionExceptions:
    """Tests for version exceptions."""

    def test_invalid_version(self):
        error = InvalidVersionError("1.0")
        assert isinstance(error, VersionError)
        assert error.version == "1.0"
        assert "MAJOR.MINOR.PATCH" in str(error)

    def test_mismatch(self):
        error = VersionMismatchError("1.0.0", "1.1.0")
        assert isinstance(error, VersionError)
        assert error.details == {"npm": "1.0.0", "nuget": "1.1.0"}

    def test_manifest(self):
        error = ManifestError("package.json", "OSError: gone")
        assert error.path == "package.json"
        assert isinstance(error, VersionError)


class TestBuildExceptions:
    """Tests for build exceptions."""

    def test_token_file(self):
        error = TokenFileError("tokens.json", "invalid JSON")
        assert isinstance(error, BuildError)
        assert error.path == "tokens.json"

    def test_output_write(self):
        error = OutputWriteError("dist/x.css", "PermissionError: denied")
        assert isinstance(error, BuildError)
        assert error.details["cause"] == "PermissionError: denied"


class TestExceptionCatching:
    """Tests for catching exceptions by category."""

    @pytest.mark.parametrize("error", [
        InvalidTokenDocumentError("x"),
        DuplicateTokenPathError("x"),
        DuplicatePropertyNameError("color", "X", "color-x", "color-X"),
        ReferenceScopeMismatchError("x", "a", "b"),
        TokenValidationError([]),
        InvalidVersionError("x"),
        VersionMismatchError(None, None),
        ManifestError("x", "y"),
        TokenFileError("x", "y"),
        OutputWriteError("x", "y"),
    ])
    def test_catch_all_by_base(self, error):
        """Test every error is catchable as TokenweaveError."""
        with pytest.raises(TokenweaveError):
            raise error
