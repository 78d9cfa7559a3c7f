"""Puzzle answers: either a rendered value or the reason there is none."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

NO_ANSWER = "No answer"


class AnswerError(Exception):
    """Raised when the value of an answer that holds none is requested."""


@dataclass(frozen=True)
class Answer:
    """The outcome of one puzzle part: a value or an error message."""

    value: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("an answer holds exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.value is not None

    def display(self) -> str:
        """Return the value, or the error message when there is no value."""
        return self.value if self.value is not None else self.error

    def unwrap(self) -> str:
        """Return the value or raise AnswerError with the error message."""
        if self.value is None:
            raise AnswerError(self.error)
        return self.value

    def __str__(self) -> str:
        return self.display()


def _format_float(value: float) -> str:
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def to_answer(value: object) -> Answer:
    """Turn whatever a solution returned into an Answer."""
    if isinstance(value, Answer):
        return value
    if value is None:
        return Answer(error=NO_ANSWER)
    if isinstance(value, BaseException):
        return Answer(error=str(value))
    if isinstance(value, str):
        return Answer(value=value)
    if isinstance(value, bool):
        raise TypeError("a boolean is not a puzzle answer")
    if isinstance(value, int):
        return Answer(value=str(value))
    if isinstance(value, float):
        return Answer(value=_format_float(value))
    raise TypeError(f"cannot turn {type(value).__name__} into an answer")