from typing import Any, Optional, Tuple


class AnsiColourTypeMismatch(AssertionError):
    expected: Any
    actual: Any

    def __init__(self, expected: Any, actual: Any, *args: object) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"expected colour of type '{expected.name}' but got '{actual.name}'",
            *args,
        )


class AnsiColourOutOfRange(ValueError):
    name: str
    val: Any
    bounds: Optional[Tuple[int, int]]

    def __init__(
        self,
        name: str,
        val: Any,
        bounds: Optional[Tuple[int, int]] = (0, 255),
        *args: object,
    ) -> None:
        self.name = name
        self.val = val
        self.bounds = bounds
        if bounds is None:
            msg = f"invalid value {val!r} for '{name}'"
        else:
            msg = (
                f"value {val!r} for '{name}' is out of range "
                f"[{bounds[0]}, {bounds[1]}]"
            )
        super().__init__(msg, *args)


class ResultTypeMismatch(AssertionError):
    expected: str
    actual: str

    def __init__(self, expected: str, actual: str, *args: object) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"called `Result::as_{expected.lower()}()` on a {actual} result",
            *args,
        )
