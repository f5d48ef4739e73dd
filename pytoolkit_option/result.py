from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from typing_extensions import override

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


class ResultError(Exception):
    """Error created from a plain message passed to Err."""

    @override
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args  # type: ignore[attr-defined]

    @override
    def __hash__(self) -> int:
        return hash((type(self), self.args))


class Result(ABC, Generic[T, E]):
    """
    Ok と Err の共通基底クラス。

    直接インスタンス化せず、Ok(value) または Err(error) を使用する。
    """

    def is_ok(self) -> bool:
        return isinstance(self, Ok)

    def is_error(self) -> bool:
        return not self.is_ok()

    def is_err(self) -> bool:
        return self.is_error()

    @property
    @abstractmethod
    def value(self) -> T:
        raise NotImplementedError()

    @property
    @abstractmethod
    def error(self) -> E:
        raise NotImplementedError()

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> E:
        return self.error


@dataclass(frozen=True)
class Ok(Result[T, E]):
    _value: T

    @property
    @override
    def value(self) -> T:
        return self._value

    @property
    @override
    def error(self) -> E:
        raise ValueError("Called error on Ok")

    @override
    def __repr__(self) -> str:
        return f"Ok({self._value!r})"


@dataclass(frozen=True, init=False)
class Err(Result[T, E]):
    _error: E

    def __init__(self, error: E | str) -> None:
        if isinstance(error, str):
            error = ResultError(error)  # type: ignore[assignment]
        object.__setattr__(self, "_error", error)

    @property
    @override
    def value(self) -> T:
        raise self._error

    @property
    @override
    def error(self) -> E:
        return self._error

    @override
    def __repr__(self) -> str:
        return f"Err({self._error!r})"
