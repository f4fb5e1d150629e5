from typing import Any, Optional, Sized

from .errors import InvalidArgumentError


def is_false(expression: bool, message: str) -> None:
    if expression:
        raise InvalidArgumentError(message)


def not_none(value: Any, message: str) -> None:
    if value is None:
        raise InvalidArgumentError(message)


def has_text(value: Optional[str], message: str) -> None:
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(message)


def has_length(value: Optional[Sized], message: str) -> None:
    if value is None or len(value) == 0:
        raise InvalidArgumentError(message)
