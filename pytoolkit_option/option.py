"""
Rustライクな Option 型を提供するモジュール。

値が「ある」(Some) か「ない」(Nothing) かを明示的に表現し、
None チェックや例外による制御フローの代わりに小さなコンビネーター群を提供する。

    def divide(left: float, right: float) -> Option[float]:
        if right == 0:
            return Nothing()
        return Some(left / right)

    match divide(10, 2):
        case Some(value):
            print(value)
        case Nothing():
            print("division by zero")
"""

import logging
import reprlib
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Final,
    Generic,
    Iterator,
    TypeVar,
    final,
)

from typing_extensions import override

from .result import Err, Ok, Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=BaseException)

log = logging.getLogger(__name__)

DEFAULT_INSPECT_DEPTH: Final = 2


@final
class _Absent:
    """Marker returned by Nothing.peek() in place of a value."""

    __slots__ = ()
    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<absent>"

    def __copy__(self) -> "_Absent":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Absent":
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()


class UnwrapError(RuntimeError):
    """Raised when a value is extracted from Nothing."""


def _formatter(depth: int) -> reprlib.Repr:
    """Return a reprlib formatter bounded by nesting depth only."""
    formatter = reprlib.Repr()
    formatter.maxlevel = depth + 1
    for name in (
        "maxtuple",
        "maxlist",
        "maxarray",
        "maxdict",
        "maxset",
        "maxfrozenset",
        "maxdeque",
        "maxstring",
        "maxlong",
        "maxother",
    ):
        setattr(formatter, name, sys.maxsize)
    return formatter


class Option(ABC, Generic[T]):
    """
    Some と Nothing の共通基底クラス。

    直接インスタンス化せず、Some(value) または Nothing() を使用する。
    インスタンスは生成後に変更されない。
    """

    @abstractmethod
    def peek(self) -> T | _Absent:
        """
        内部表現をそのまま返す。

        match 文などの分岐にのみ使用し、等価比較には使用しないこと。
        値がない場合は ABSENT を返す。
        """
        raise NotImplementedError()

    def is_some(self) -> bool:
        return self.peek() is not ABSENT

    def is_none(self) -> bool:
        return self.peek() is ABSENT

    def expect(self, message: str) -> T:
        value = self.peek()
        if value is ABSENT:
            raise UnwrapError(message)
        return value  # type: ignore[return-value]

    def unwrap(self) -> T:
        return self.expect("Unwrap called on None")

    def unwrap_or(self, fallback: T) -> T:
        value = self.peek()
        if value is ABSENT:
            return fallback
        return value  # type: ignore[return-value]

    def unwrap_or_else(self, producer: Callable[[], T]) -> T:
        """値がない場合のみ producer を呼び出し、その結果を返す。"""
        value = self.peek()
        if value is ABSENT:
            return producer()
        return value  # type: ignore[return-value]

    def map(self, fn: Callable[[T], U]) -> "Option[U]":
        value = self.peek()
        if value is ABSENT:
            return Nothing()
        return Some(fn(value))  # type: ignore[arg-type]

    def map_or(self, fallback: U, fn: Callable[[T], U]) -> U:
        value = self.peek()
        if value is ABSENT:
            return fallback
        return fn(value)  # type: ignore[arg-type]

    def or_(self, alternative: "Option[T]") -> "Option[T]":
        """
        値があれば自身を、なければ alternative を返す。

        alternative は呼び出し前に構築済みである必要がある。
        遅延評価が必要な場合は unwrap_or_else を使用する。
        """
        if self.is_none():
            return alternative
        return self

    def and_then(self, fn: Callable[[T], "Option[U]"]) -> "Option[U]":
        """値があれば fn を適用し、その Option をそのまま返す。"""
        value = self.peek()
        if value is ABSENT:
            return Nothing()
        return fn(value)  # type: ignore[arg-type]

    def flatten(self) -> "Option[Any]":
        """
        Option[Option[T]] を Option[T] に変換する。

        内包する値を実行時に検査し、Option であれば一段だけ展開する。
        それ以外の場合は自身をそのまま返す。
        """
        value = self.peek()
        if isinstance(value, Option):
            return value
        return self

    def ok_or(self, error: E | str) -> Result[T, E]:
        """
        Option[T] を Result[T, E] に変換する。

        Some(v) は Ok(v) に、Nothing は Err(error) になる。
        文字列を渡した場合は ResultError に昇格される。
        """
        value = self.peek()
        if value is ABSENT:
            return Err(error)
        return Ok(value)  # type: ignore[arg-type]

    @classmethod
    def from_nullable(cls, value: T | None) -> "Option[T]":
        """None を Nothing に、それ以外の値を Some に変換する。"""
        if value is None:
            return Nothing()
        return Some(value)

    @classmethod
    async def from_async(
        cls,
        producer: Callable[[], Awaitable[T | None]],
    ) -> "Option[T]":
        """
        非同期関数を実行し、その結果を Option に変換する。

        結果が None の場合は Nothing を返す。
        producer で発生した例外はそのまま呼び出し元に伝播する。

        Args:
            producer: 値または None を返す非同期関数
        """
        value = await producer()
        if value is None:
            log.debug("%r settled as absent", producer)
        return cls.from_nullable(value)

    def __iter__(self) -> Iterator[T]:
        value = self.peek()
        if value is not ABSENT:
            yield value  # type: ignore[misc]

    def inspect(self, depth: int = DEFAULT_INSPECT_DEPTH) -> str:
        """
        深さ制限付きの表示用文字列を返す。

        depth が負になった時点で内包する値の整形を省略する。
        幅による省略は行わない。
        """
        value = self.peek()
        if value is ABSENT:
            return "None"
        if depth < 0:
            return "Some(...)"
        if isinstance(value, Option):
            return f"Some({value.inspect(depth - 1)})"
        return f"Some({_formatter(depth).repr(value)})"

    @override
    def __repr__(self) -> str:
        return self.inspect()


@dataclass(frozen=True, repr=False)
class Some(Option[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is ABSENT:
            raise TypeError("ABSENT cannot be wrapped in Some; use Nothing()")

    @override
    def peek(self) -> T:
        return self.value


@dataclass(frozen=True, repr=False)
class Nothing(Option[T]):
    @override
    def peek(self) -> _Absent:
        return ABSENT


def as_option(value: T | None) -> Option[T]:
    return Option.from_nullable(value)
