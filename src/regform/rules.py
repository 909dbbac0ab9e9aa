"""
Validation rules for registration fields.

A Rule checks a single value and reports the first violation as a
human-readable message. Rules are thin wrappers around pydantic
TypeAdapters: constraints are expressed as annotated types whose
validators raise PydanticCustomError, so the configured message is
surfaced verbatim instead of pydantic's generic wording.

Usage:
    from regform.rules import text, non_negative

    rule = text(min_length=2, message="Name must be at least 2 characters")
    rule.validate("J")   # -> "Name must be at least 2 characters"
    rule.validate("Jo")  # -> None
"""

import re
from typing import Annotated, Any, Iterable

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, AllowInfNan, AnyUrl, Strict, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

# Domains must end in a top-level label of two or more letters
TOP_LEVEL_DOMAIN = re.compile(r"\.[^\W\d_]{2,}\Z")

_URL_ADAPTER = TypeAdapter(AnyUrl)

StrictText = Annotated[str, Strict()]


def first_error_message(exc: ValidationError) -> str:
    """Return the message of the first error in a pydantic ValidationError."""
    errors = exc.errors(include_url=False)
    if not errors:
        return "Validation failed"
    return errors[0]["msg"]


def _min_length(minimum: int, message: str) -> AfterValidator:
    def check(value):
        if len(value) < minimum:
            raise PydanticCustomError("too_short", message)
        return value

    return AfterValidator(check)


def _minimum(minimum: float, message: str) -> AfterValidator:
    def check(value):
        if value < minimum:
            raise PydanticCustomError("too_small", message)
        return value

    return AfterValidator(check)


def _valid_email(message: str) -> AfterValidator:
    def check(value: str) -> str:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("value_error", message) from None
        if not TOP_LEVEL_DOMAIN.search(value.rpartition("@")[2]):
            raise PydanticCustomError("value_error", message)
        return value

    return AfterValidator(check)


def _one_of(values: tuple[str, ...], message: str) -> AfterValidator:
    def check(value: str) -> str:
        if value not in values:
            raise PydanticCustomError("not_an_option", message)
        return value

    return AfterValidator(check)


def _valid_url(message: str) -> AfterValidator:
    def check(value: str) -> str:
        try:
            _URL_ADAPTER.validate_python(value)
        except ValidationError:
            raise PydanticCustomError("url_parsing", message) from None
        return value

    return AfterValidator(check)


# Annotated types, shared by field rules and the nested profile models

def MinText(minimum: int, message: str) -> Any:
    """Strict string of at least `minimum` characters."""
    return Annotated[str, Strict(), _min_length(minimum, message)]


def EmailText(message: str) -> Any:
    """Strict string holding a syntactically valid email address."""
    return Annotated[str, Strict(), _valid_email(message)]


def UrlText(message: str) -> Any:
    """Strict string that parses as an absolute URL."""
    return Annotated[str, Strict(), _valid_url(message)]


def OneOf(values: Iterable[str], message: str | None = None) -> Any:
    """Strict string restricted to an enumeration."""
    values = tuple(values)
    message = message or f"Must be one of: {', '.join(values)}"
    return Annotated[str, Strict(), _one_of(values, message)]


def NonNegative(message: str) -> Any:
    """Finite number (int or float, never bool or str) that is >= 0."""
    return Annotated[float, Strict(), AllowInfNan(False), _minimum(0, message)]


def NonEmptyList(message: str) -> Any:
    """List of strings holding at least one item."""
    return Annotated[list[StrictText], _min_length(1, message)]


class Rule:
    """
    A validation capability over a single value.

    Rules never raise for invalid input; `validate` returns the first
    violation message or None. Exceptions that are not pydantic
    ValidationErrors (a broken validator) propagate to the caller.
    """

    def __init__(self, annotation: Any, description: str | None = None):
        self.annotation = annotation
        self.description = description
        self._adapter = TypeAdapter(annotation)

    def validate(self, value: Any) -> str | None:
        """Validate a value, returning the first violation message or None."""
        try:
            self._adapter.validate_python(value)
        except ValidationError as exc:
            return first_error_message(exc)
        return None

    def parse(self, value: Any) -> Any:
        """Validate and return the coerced value. Raises ValidationError."""
        return self._adapter.validate_python(value)

    def __repr__(self) -> str:
        return f"Rule({self.description or self.annotation!r})"


def text(min_length: int = 0, message: str | None = None) -> Rule:
    """Rule for a string, optionally with a minimum length."""
    if min_length:
        message = message or f"Must be at least {min_length} characters"
        return Rule(MinText(min_length, message), description=message)
    return Rule(StrictText, description="text")


def email(message: str = "Invalid email address") -> Rule:
    return Rule(EmailText(message), description=message)


def url(message: str = "Invalid URL") -> Rule:
    return Rule(UrlText(message), description=message)


def choice(values: Iterable[str], message: str | None = None) -> Rule:
    """Rule for a value drawn from a fixed set of options."""
    annotation = OneOf(values, message)
    return Rule(annotation, description=message or "choice")


def non_empty_list(message: str) -> Rule:
    return Rule(NonEmptyList(message), description=message)


def string_list() -> Rule:
    return Rule(list[StrictText], description="list of text")


def non_negative(message: str) -> Rule:
    return Rule(NonNegative(message), description=message)


def nested(model: type) -> Rule:
    """Rule validating a nested object against a pydantic model."""
    return Rule(model, description=model.__name__)
