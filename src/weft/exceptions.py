"""
Weft Exceptions.

Centralized exception hierarchy for the application.
"""

class WeftError(Exception):
    """Base exception for all Weft errors."""
    pass


class ConfigurationError(WeftError):
    """Raised when configuration is invalid or missing."""
    pass


class ScriptError(WeftError):
    """Raised when a script statement cannot be rendered."""
    pass


class InvalidIdentifierError(ScriptError):
    """Raised when a binding name or property path is not a valid identifier."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"invalid identifier: {name}")


class ScriptEncodingError(ScriptError):
    """Raised when a value cannot be encoded as JSON."""
    pass


class DOMError(WeftError):
    """Raised when DOM operations fail."""
    pass


class ParseError(DOMError):
    """Raised when HTML source cannot be read or parsed."""
    pass


class SelectorError(DOMError):
    """Raised when a CSS selector is invalid."""
    pass


class CheckError(DOMError):
    """Raised when a render checker rejects a tree."""
    pass
