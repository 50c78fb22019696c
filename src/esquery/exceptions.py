"""Exceptions raised by esquery.

Every error carries a human-readable message plus keyword details (the offending
group, operator, value, index, ...) that are rendered into the message.
"""

from typing import Any, Dict


class EsQueryError(Exception):
    """Base exception for all esquery errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# Builder precondition failures
class ValidationError(EsQueryError):
    """Raised when a builder call would store a malformed condition."""


class InvalidGroupError(ValidationError):
    """Raised when a clause is added under an unknown boolean group.

    Example:
        >>> raise InvalidGroupError("Invalid where type: bogus", group="bogus")
    """


class InvalidOperatorError(ValidationError):
    """Raised when a range helper receives an operator outside ``> >= < <=``.

    Example:
        >>> raise InvalidOperatorError("Invalid operator: =~", operator="=~", field="age")
    """


class InvalidValueOperatorError(ValidationError):
    """Raised when ``None`` is paired with an operator that only accepts values.

    Example:
        >>> raise InvalidValueOperatorError("Illegal operator and value combination", operator=">", field="age")
    """


# Configuration
class ConfigurationError(EsQueryError):
    """Raised when configuration is invalid or missing."""


class MissingConfigError(ConfigurationError):
    """Raised when a required setting or collaborator is not configured.

    Example:
        >>> raise MissingConfigError("Elasticsearch hosts not set", config_key="ELASTICSEARCH_HOSTS")
    """


# Execution
class SearchError(EsQueryError):
    """Raised when the search backend rejects or fails to run a compiled query.

    Example:
        >>> raise SearchError("Search request failed", index="books", status=400)
    """
