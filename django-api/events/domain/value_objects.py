"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date
from typing import Self
from uuid import UUID


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Email:
    """Participant email address.

    Stored exactly as given: no case folding, so ``A@x.edu`` and ``a@x.edu``
    are different participants.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Email cannot be blank")
        if self.value != self.value.strip():
            raise ValueError("Email cannot have surrounding whitespace")


@dataclass(frozen=True)
class EventDetails:
    """The descriptive, editable part of an Event."""

    name: str
    description: str
    date: date
    location: str

    def __post_init__(self) -> None:
        for field in ("name", "description", "location"):
            value = getattr(self, field)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{field} is required")
        if not isinstance(self.date, date):
            raise ValueError("date is required")
