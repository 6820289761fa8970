from typing import (
    Any,
    Generic,
    Optional,
    TypeVar,
    Union,
)

from ..types import ResultTypeMismatch


T = TypeVar("T")


class Success(Generic[T]):
    value: T

    def __init__(self, value: T) -> None:
        self.value = value


class Failure:
    error: str

    def __init__(self, error: str) -> None:
        self.error = error


class Result(Generic[T]):
    """a success holding a value, or a failure holding an error message"""

    _v: Union[Success[T], Failure]

    def __init__(self, val: Union[Success[T], Failure]) -> None:
        self._v = val

    def is_success(self) -> bool:
        return isinstance(self._v, Success)

    def is_failure(self) -> bool:
        return isinstance(self._v, Failure)

    def as_success(self) -> T:
        if not isinstance(self._v, Success):
            raise ResultTypeMismatch("Success", "Failure")
        return self._v.value

    def as_failure(self) -> str:
        if not isinstance(self._v, Failure):
            raise ResultTypeMismatch("Failure", "Success")
        return self._v.error

    def unwrap(self) -> T:
        if isinstance(self._v, Failure):
            raise ValueError(
                f"called `Result::unwrap()` on a failure: {self._v.error}"
            )
        return self._v.value

    def unwrap_or(self, default: T) -> T:
        if isinstance(self._v, Failure):
            return default
        return self._v.value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        if self.is_success() and other.is_success():
            return self.as_success() == other.as_success()
        if self.is_failure() and other.is_failure():
            return self.as_failure() == other.as_failure()
        return False

    def __str__(self) -> str:
        if isinstance(self._v, Success):
            return f"Result::Success({self._v.value})"
        return f"Result::Failure({self._v.error})"

    def __repr__(self) -> str:
        return self.__str__()

    @classmethod
    def success(cls, val: Optional[T] = None) -> "Result[T]":
        return cls(Success(val))  # type: ignore

    @classmethod
    def failure(cls, error: str) -> "Result[T]":
        return cls(Failure(error))

    @classmethod
    def failure_if(
        cls, condition: bool, val: Optional[T], error: str
    ) -> "Result[T]":
        return cls.failure(error) if condition else cls.success(val)


def result_assert(result: Result, *expected: Any) -> None:
    assert result.is_success(), result.as_failure()
    if len(expected) != 0:
        assert result.as_success() == expected[0]
