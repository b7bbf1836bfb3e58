"""
Error handling utilities for styledextract.

The hierarchy separates the three failure families of an extraction:
not-applicable (the refactoring is simply not offered), missing anchors
(an expected syntax node is absent, the invocation stops without further
edits) and manipulation failures (an edit would corrupt the document, these
propagate to the caller).
"""
import functools
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger('styledextract')


class StyledExtractError(Exception):
    """Base class for all styledextract exceptions.

    Keyword arguments are kept as context and rendered by ``__str__``.
    """
    def __init__(self, message: str, **kwargs):
        self.message = message
        self.context = dict(kwargs.pop('context', {}) or {})
        for key, value in kwargs.items():
            if value is not None:
                self.context[key] = value
        super().__init__(message)

    def add_context(self, key: str, value: Any) -> None:
        """Add additional context information to the exception."""
        self.context[key] = value

    def __str__(self) -> str:
        if not self.context:
            return self.message
        context_str = ', '.join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} [Context: {context_str}]"

# ===== Validation Errors =====

class ValidationError(StyledExtractError):
    """Exception raised for input validation failures."""
    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Optional[Any] = None, expected: Optional[str] = None, **kwargs):
        super().__init__(message, parameter=parameter, value=value, expected=expected, **kwargs)
        self.parameter = parameter
        self.value = value
        self.expected = expected


class InvalidParameterError(ValidationError):
    """Exception raised when a parameter has an invalid value."""
    def __init__(self, parameter: str, value: Any, expected: str, **kwargs):
        message = f"Invalid value for parameter '{parameter}': {value!r}. Expected: {expected}"
        super().__init__(message, parameter=parameter, value=value, expected=expected, **kwargs)

# ===== Configuration Errors =====

class ConfigurationError(StyledExtractError):
    """Exception raised for issues with configuration settings."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Exception raised when a configuration setting has an invalid value."""
    def __init__(self, setting: str, value: Any, reason: str, **kwargs):
        message = f"Invalid configuration setting '{setting}': {value!r}. Reason: {reason}"
        super().__init__(message, setting=setting, value=value, reason=reason, **kwargs)
        self.setting = setting

# ===== Language / Parsing Errors =====

class UnsupportedLanguageError(StyledExtractError):
    """Exception raised when a file kind has no JSX grammar."""
    def __init__(self, language: str, operation: Optional[str] = None, **kwargs):
        message = f"Unsupported language: '{language}'"
        if operation:
            message += f" for operation: {operation}"
        super().__init__(message, language=language, operation=operation, **kwargs)
        self.language = language
        self.operation = operation


# ===== AST Navigation Errors =====

class ASTNavigationError(StyledExtractError):
    """Exception raised for problems navigating the syntax tree."""
    pass


class NodeNotFoundError(ASTNavigationError):
    """An expected node is missing from a tree (a missing anchor)."""
    def __init__(self, node_type: str, where: Optional[str] = None, **kwargs):
        message = f"Node of type '{node_type}' not found"
        if where:
            message += f" in {where}"
        super().__init__(message, node_type=node_type, where=where, **kwargs)
        self.node_type = node_type
        self.where = where


class NotApplicableError(StyledExtractError):
    """The refactoring is not offered at the requested position."""
    def __init__(self, reason: str, offset: Optional[int] = None, **kwargs):
        super().__init__(f"Extraction not applicable: {reason}", offset=offset, **kwargs)
        self.reason = reason
        self.offset = offset

# ===== Manipulation Errors =====

class ManipulationError(StyledExtractError):
    """Exception raised for errors while editing a document."""
    pass


class EditConflictError(ManipulationError):
    """Edits overlap or fall outside the document; nothing was applied."""
    def __init__(self, reason: str, **kwargs):
        super().__init__(f"Edit rejected: {reason}", reason=reason, **kwargs)
        self.reason = reason


class SessionStateError(StyledExtractError):
    """An operation was requested in a state of the naming session that forbids it."""
    def __init__(self, operation: str, status: str, **kwargs):
        message = f"Cannot {operation} a naming session in state '{status}'"
        super().__init__(message, operation=operation, status=status, **kwargs)
        self.operation = operation
        self.status = status

# ===== Utility Decorators =====

def handle_missing_anchor(func: Callable) -> Callable:
    """
    Decorator that turns a missing anchor into a silent ``None`` result.

    Not-applicable and missing-anchor failures are non-destructive no-ops for
    the caller; anything else propagates.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except NodeNotFoundError as e:
            logger.debug(f"{func.__name__} aborted: {e}")
            return None
        except NotApplicableError as e:
            logger.debug(f"{func.__name__} skipped: {e}")
            return None
    return wrapper
