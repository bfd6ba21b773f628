"""Warnings accumulator threaded through every orchestration call."""

from typing import Awaitable, Iterable, Iterator, List, Tuple, TypeVar

from ..errors import APIError

T = TypeVar("T")


class Warnings:
    """Ordered, append-only sequence of advisory messages.

    Messages are never deduplicated and keep the order of the calls that
    produced them. Callers own the accumulator, so warnings gathered before
    a failure remain available after the exception propagates.
    """

    def __init__(self, messages: Iterable[str] = ()):
        self._messages: List[str] = list(messages)

    def extend(self, messages: Iterable[str]) -> None:
        self._messages.extend(messages)

    async def collect(self, call: Awaitable[Tuple[T, List[str]]]) -> T:
        """Awaits a collaborator call returning (value, warnings).

        Appends the call's warnings and returns the value. If the call
        raises an APIError its warnings are appended first and the error
        propagates unchanged.
        """
        try:
            value, messages = await call
        except APIError as e:
            self.extend(e.warnings)
            raise
        self.extend(messages)
        return value

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Warnings):
            return self._messages == other._messages
        if isinstance(other, list):
            return self._messages == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"Warnings({self._messages!r})"
