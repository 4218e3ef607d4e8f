"""Domain error types shared by the delivery model."""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base class for all errors raised by the delivery domain."""


def _sanitize(value: Any) -> str:
    return str(value).replace("\n", " ")


class ObjectNotFoundError(DomainError, LookupError):
    """An object looked up by identifier does not exist."""

    kind = "object not found"

    def __init__(self, param_name: str, id: Any, cause: BaseException | None = None) -> None:
        self.param_name = param_name
        self.id = id
        self.cause = cause
        super().__init__(self._message())

    def _message(self) -> str:
        if self.cause is not None:
            return (
                f"{self.kind}: param is: {self.param_name}, "
                f"ID is: {self.id} (cause: {self.cause})"
            )
        return f"{self.kind}: {self.id}"


class ValueIsInvalidError(DomainError, ValueError):
    """A parameter holds a value that is not acceptable."""

    kind = "value is invalid"

    def __init__(self, param_name: str, cause: BaseException | None = None) -> None:
        self.param_name = param_name
        self.cause = cause
        super().__init__(self._message())

    def _message(self) -> str:
        if self.cause is not None:
            return f"{self.kind}: {self.param_name} (cause: {self.cause})"
        return f"{self.kind}: {self.param_name}"


class ValueIsOutOfRangeError(DomainError, ValueError):
    """A parameter lies outside its allowed bounds."""

    kind = "value is out of range"

    def __init__(
        self,
        param_name: str,
        value: Any,
        min: Any,
        max: Any,
        cause: BaseException | None = None,
    ) -> None:
        self.param_name = param_name
        self.value = value
        self.min = min
        self.max = max
        self.cause = cause
        super().__init__(self._message())

    def _message(self) -> str:
        text = (
            f"{ValueIsInvalidError.kind}: {_sanitize(self.value)} is {self.param_name}, "
            f"min value is {self.min}, max value is {self.max}"
        )
        if self.cause is not None:
            text += f" (cause: {self.cause})"
        return text


class ValueIsRequiredError(DomainError, ValueError):
    """A required parameter was missing or empty."""

    kind = "value is required"

    def __init__(self, param_name: str, cause: BaseException | None = None) -> None:
        self.param_name = param_name
        self.cause = cause
        super().__init__(self._message())

    def _message(self) -> str:
        if self.cause is not None:
            return f"{self.kind}: {self.param_name} (cause: {self.cause})"
        return f"{self.kind}: {self.param_name}"


class VersionIsInvalidError(DomainError):
    """An aggregate version does not match the expected one."""

    kind = "version is invalid"

    def __init__(self, param_name: str, cause: BaseException | None = None) -> None:
        self.param_name = param_name
        self.cause = cause
        super().__init__(self._message())

    def _message(self) -> str:
        if self.cause is not None:
            return f"{self.kind}: {self.param_name} (cause: {self.cause})"
        return f"{self.kind}: {self.param_name}"