from collections.abc import Callable
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic
from typing import TypeVar

from loguru import logger

from .problem import InvalidArgument
from .problem import NoSuchElement
from .problem import Problem


T = TypeVar("T")
U = TypeVar("U")


def _fail(problem: Problem):
    logger.debug(problem)
    raise problem


@dataclass(frozen=True)
class Option(Generic[T]):
    # inner value of this option, never access it directly, instead use Option.get() or one of the Option.or_else*()
    # None is the absence marker, so an Option can never hold None as a value
    _value: T | None = None

    def __repr__(self) -> str:
        if self.is_present():
            return "Option::Some({!r})".format(self._value)
        return "Option::None"

    def __iter__(self) -> Iterator[T]:
        if self.is_present():
            yield self._value

    @classmethod
    def empty(cls) -> "Option[T]":
        """Build an empty Option."""
        return cls()

    @classmethod
    def of(cls, value: T) -> "Option[T]":
        """Build an Option around a value that is known to exist, raises InvalidArgument for None.

        Use Option.of_nullable() if the value may be None."""
        if value is None:
            _fail(InvalidArgument("Option.of() was given None, use Option.of_nullable() instead."))
        return cls(value)

    @classmethod
    def of_nullable(cls, value: T | None) -> "Option[T]":
        """Build an Option, treating None as empty."""
        return cls(value)

    def is_present(self) -> bool:
        """Check if the Option contains a value or not."""
        return self._value is not None

    def is_empty(self) -> bool:
        return not self.is_present()

    def get(self) -> T:
        """Attempt to get value, raises NoSuchElement if missing."""
        return self.or_else_throw()

    def map(self, fn: Callable[[T], U | None]) -> "Option[U]":
        """Map Option[T] to Option[U] via the provided callable.

        This is eagerly evaluated and immediately applies the mapping. `fn` is
        never called on an empty Option, and if it returns None the result is empty."""
        if self.is_empty():
            return self.empty()
        return self.of_nullable(fn(self._value))

    def flat_map(self, fn: Callable[[T], "Option[U]"]) -> "Option[U]":
        """Like Option.map(), but `fn` returns an Option which is passed through without wrapping."""
        if self.is_empty():
            return self.empty()

        result = fn(self._value)
        if not isinstance(result, Option):
            _fail(InvalidArgument("Option.flat_map() expected an Option, got {}".format(type(result).__name__)))
        return result

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        """Keep the value only if it satisfies `predicate`."""
        if self.is_present() and predicate(self._value):
            return self
        return self.empty()

    def or_(self, supplier: Callable[[], "Option[T]"]) -> "Option[T]":
        """Return this Option if it has a value, otherwise the Option built by `supplier`.

        The supplier is only called when this Option is empty."""
        if self.is_present():
            return self
        return supplier()

    def or_else(self, default: U) -> T | U:
        """Attempt to get a value, or return the provided default.

        The default is used as-is, even if it's callable. See Option.or_else_get()."""
        if self.is_present():
            return self._value
        return default

    def or_else_get(self, supplier: Callable[[], U]) -> T | U:
        """Attempt to get a value, or return the result of calling `supplier`."""
        if self.is_present():
            # we have a value, don't bother with the supplier
            return self._value
        return supplier()

    def or_else_throw(self, error_factory: Callable[[], BaseException] | None = None) -> T:
        """Attempt to get a value, or raise.

        Raises NoSuchElement by default. Pass an Exception class, or a fn() ->
        Exception, to raise something else instead."""
        if self.is_present():
            return self._value

        if error_factory is None:
            msg = "Option did not contain a value. Check Option.is_present() or use Option.or_else()."
            _fail(NoSuchElement(msg))

        raise error_factory()

    def if_present(self, consumer: Callable[[T], object]) -> None:
        """Call `consumer` with the value, if there is one."""
        if self.is_present():
            consumer(self._value)

    def if_present_or_else(self, consumer: Callable[[T], object], absent_action: Callable[[], object]) -> None:
        """Call `consumer` with the value if there is one, otherwise call `absent_action`. Never both."""
        if self.is_present():
            consumer(self._value)
        else:
            absent_action()
