"""
Result wrapper returned by every fallible repository operation.

A Resource is either a Success carrying the payload or an Error carrying a
human-readable message. Callers check the variant before using the payload.
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying its payload."""

    data: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def message(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class Error:
    """Failed outcome carrying a message that can be shown to the user."""

    message: str

    @property
    def is_success(self) -> bool:
        return False

    @property
    def data(self) -> None:
        return None


Resource = Union[Success[T], Error]
