#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Mika is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# Mika is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with Mika.  If not, see <https://www.gnu.org/licenses/>.


"""
The contract a chat service must fulfil for a :class:`Navigator` to drive it.

The navigator never talks to Discord directly. Everything it needs (sending,
editing and deleting messages, managing reactions, and waiting for reactions
or replies) goes through a :class:`Transport`.
"""

__all__ = (
    "Capability",
    "Content",
    "Identity",
    "Event",
    "Reply",
    "TimedOut",
    "TimedOutType",
    "Transport",
    "REQUIRED_CAPABILITIES",
)

import enum
import typing
from abc import ABC
from abc import abstractmethod
from dataclasses import dataclass

from mika import singleton


class Capability(enum.Enum):
    """Things the transport must be allowed to do in a destination."""

    ADD_MARKER = "add reactions"
    MANAGE_MARKERS = "manage reactions"
    MANAGE_SURFACES = "manage messages"
    RENDER_RICH_CONTENT = "embed links"

    def __str__(self):
        return self.value


REQUIRED_CAPABILITIES = frozenset(Capability)


class Content(typing.NamedTuple):
    """What to show on a message: some text, a rich payload, or both."""

    text: typing.Optional[str] = None
    payload: typing.Any = None


@dataclass(frozen=True)
class Identity:
    id: int
    is_bot: bool = False


@dataclass(frozen=True)
class Event:
    """A reaction added to a message."""

    symbol: str
    identity: Identity
    # Whatever the transport needs to retract this reaction later.
    handle: typing.Any = None


@dataclass(frozen=True)
class Reply:
    """A text message sent to a destination."""

    content: str
    identity: Identity
    surface: typing.Any = None


class TimedOutType(singleton.Singleton):
    """
    Returned from a wait when nothing qualifying arrived in time. This is an
    expected outcome rather than an error, so it is not an exception.
    """

    __slots__ = ()

    def __bool__(self):
        return False


TimedOut = TimedOutType()


class Transport(ABC):
    """
    Abstract chat transport. Implementations must raise
    :class:`mika.errors.TransportError` for any failure.
    """

    #: Type every page payload must be an instance of.
    payload_type: typing.ClassVar[type] = object

    @abstractmethod
    async def publish(self, destination, content: Content):
        """Sends a new message to the destination and returns its handle."""
        ...

    @abstractmethod
    async def edit(self, surface, content: Content) -> None:
        ...

    @abstractmethod
    async def delete(self, surface) -> None:
        ...

    @abstractmethod
    async def add_marker(self, surface, symbol: str) -> None:
        ...

    @abstractmethod
    async def clear_markers(self, surface) -> None:
        ...

    async def retract(self, surface, event: Event) -> None:
        """
        Removes the reaction that triggered an event. Transports that cannot
        do this may leave it as a no-op.
        """

    @abstractmethod
    async def await_event(
        self, surface, predicate: typing.Callable[[Event], bool], timeout: float
    ) -> typing.Union[Event, TimedOutType]:
        """
        Waits for the first event on the surface that satisfies the predicate.
        Events that arrived before this call are not considered.
        """
        ...

    @abstractmethod
    async def await_reply(
        self, destination, predicate: typing.Callable[[Reply], bool], timeout: float
    ) -> typing.Union[Reply, TimedOutType]:
        """Waits for the first reply in the destination that satisfies the predicate."""
        ...

    @abstractmethod
    async def capabilities_of(self, destination) -> typing.FrozenSet[Capability]:
        ...
