from __future__ import annotations

import typing


class UsageError(TypeError):
    """Combinator was built from an argument of the wrong shape."""

    value: typing.Any

    def __init__(self, message: str, value: typing.Any = None) -> None:
        self.value = value
        super().__init__(message)


class UnsupportedContainerError(UsageError):
    """Value is none of the container kinds the adapters understand."""

    def __init__(self, value: typing.Any) -> None:
        super().__init__(f"Cannot traverse {type(value).__name__!r} value", value)


class StreamRebuildError(UsageError):
    """Streams are consumed once and have no concrete form to rebuild."""

    def __init__(self, value: typing.Any) -> None:
        super().__init__("Streams cannot be rebuilt, derive a new stream instead", value)


class StreamConsumedError(RuntimeError):
    """Stream already has its one subscriber."""

    stream: typing.Any

    def __init__(self, stream: typing.Any) -> None:
        self.stream = stream
        super().__init__("Stream was already subscribed to")


__all__ = (
    "StreamConsumedError",
    "StreamRebuildError",
    "UnsupportedContainerError",
    "UsageError",
)
