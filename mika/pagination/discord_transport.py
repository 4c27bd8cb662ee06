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
Transport implementation backed by discord.py.
"""

__all__ = ("DiscordTransport",)

import asyncio
import functools
import typing

import discord
from discord.ext import commands

from mika import logging_utils
from mika.errors import TransportError
from mika.pagination.transport import Capability
from mika.pagination.transport import Content
from mika.pagination.transport import Event
from mika.pagination.transport import Identity
from mika.pagination.transport import Reply
from mika.pagination.transport import TimedOut
from mika.pagination.transport import Transport


def translate_http_errors(coro):
    """Re-raises any Discord HTTP failure in the decorated coroutine as a TransportError."""

    @functools.wraps(coro)
    async def wrapper(*args, **kwargs):
        try:
            return await coro(*args, **kwargs)
        except discord.HTTPException as ex:
            raise TransportError(f"{coro.__name__} failed: {ex}") from ex

    return wrapper


def identity_of(user: typing.Union[discord.User, discord.Member]) -> Identity:
    return Identity(id=user.id, is_bot=user.bot)


class DiscordTransport(Transport, logging_utils.Loggable):
    """
    Args:
        bot: the client to listen for reactions and messages on.
    """

    payload_type = discord.Embed

    def __init__(self, bot: typing.Union[commands.Bot, discord.Client]):
        self.bot = bot

    @translate_http_errors
    async def publish(self, destination: discord.abc.Messageable, content: Content) -> discord.Message:
        return await destination.send(content=content.text, embed=content.payload)

    @translate_http_errors
    async def edit(self, surface: discord.Message, content: Content) -> None:
        await surface.edit(content=content.text, embed=content.payload)

    @translate_http_errors
    async def delete(self, surface: discord.Message) -> None:
        await surface.delete()

    @translate_http_errors
    async def add_marker(self, surface: discord.Message, symbol: str) -> None:
        await surface.add_reaction(symbol)

    @translate_http_errors
    async def clear_markers(self, surface: discord.Message) -> None:
        await surface.clear_reactions()

    @translate_http_errors
    async def retract(self, surface: discord.Message, event: Event) -> None:
        if event.handle is not None:
            await surface.remove_reaction(event.symbol, event.handle)

    async def await_event(self, surface: discord.Message, predicate, timeout: float):
        def check(reaction, user):
            return reaction.message.id == surface.id and predicate(self._event_from(reaction, user))

        try:
            reaction, user = await self.bot.wait_for("reaction_add", check=check, timeout=timeout)
        except asyncio.TimeoutError:
            return TimedOut
        else:
            return self._event_from(reaction, user)

    async def await_reply(self, destination: discord.abc.Messageable, predicate, timeout: float):
        channel_id = getattr(destination, "id", None)

        def check(message):
            return message.channel.id == channel_id and predicate(self._reply_from(message))

        try:
            message = await self.bot.wait_for("message", check=check, timeout=timeout)
        except asyncio.TimeoutError:
            return TimedOut
        else:
            return self._reply_from(message)

    async def capabilities_of(self, destination) -> typing.FrozenSet[Capability]:
        guild = getattr(destination, "guild", None)
        me = guild.me if guild is not None else self.bot.user
        permissions = destination.permissions_for(me)

        granted = set()
        if permissions.add_reactions:
            granted.add(Capability.ADD_MARKER)
        if permissions.manage_messages:
            granted.add(Capability.MANAGE_MARKERS)
            granted.add(Capability.MANAGE_SURFACES)
        if permissions.embed_links:
            granted.add(Capability.RENDER_RICH_CONTENT)

        self.logger.debug("Granted %s in %s", ", ".join(map(str, granted)) or "nothing", destination)
        return frozenset(granted)

    @staticmethod
    def _event_from(reaction: discord.Reaction, user) -> Event:
        return Event(symbol=str(reaction.emoji), identity=identity_of(user), handle=user)

    @staticmethod
    def _reply_from(message: discord.Message) -> Reply:
        return Reply(content=message.content, identity=identity_of(message.author), surface=message)
