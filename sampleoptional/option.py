from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .errors import NoSuchValueError, NullValueError

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """A value that may be absent.

    ``Some`` holds a value that is never ``None``; ``NONE`` holds nothing.
    Instances are immutable and compare by identity only.
    """

    def is_present(self) -> bool: raise NotImplementedError
    def is_empty(self) -> bool: return not self.is_present()

    def get(self) -> T:
        if self.is_present():
            return self.value  # type: ignore[attr-defined]
        raise NoSuchValueError("no value present")

    def if_present(self, action: Callable[[T], Any]) -> None:
        if self.is_present():
            action(self.value)  # type: ignore[attr-defined]

    def if_present_or_else(self, action: Callable[[T], Any], empty_action: Callable[[], Any]) -> None:
        if self.is_present():
            action(self.value)  # type: ignore[attr-defined]
        else:
            empty_action()

    def or_else(self, default: U) -> T | U:
        return self.value if self.is_present() else default  # type: ignore[attr-defined]

    def or_else_get(self, supplier: Callable[[], U]) -> T | U:
        return self.value if self.is_present() else supplier()  # type: ignore[attr-defined]

    def or_else_throw(self, error_supplier: Optional[Callable[[], BaseException]] = None) -> T:
        if self.is_present():
            return self.value  # type: ignore[attr-defined]
        if error_supplier is None:
            raise NoSuchValueError("no value present")
        raise error_supplier()

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        if self.is_present() and predicate(self.value):  # type: ignore[attr-defined]
            return self
        return NONE

    def map(self, f: Callable[[T], Optional[U]]) -> "Option[U]":
        if self.is_present():
            return of_nullable(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_present():
            return f(self.value)  # type: ignore[attr-defined]
        return NONE


@dataclass(frozen=True, eq=False)
class Some(Option[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise NullValueError("Some cannot wrap None, use empty() instead")

    def is_present(self) -> bool: return True


class _None(Option[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "NONE"
    def is_present(self) -> bool: return False


NONE: Option[Any] = _None()


def empty() -> Option[Any]:
    return NONE


def of(value: T) -> Option[T]:
    if value is None:
        raise NullValueError("of() requires a non-None value")
    return Some(value)


def of_nullable(value: Optional[T]) -> Option[T]:
    return Some(value) if value is not None else NONE
