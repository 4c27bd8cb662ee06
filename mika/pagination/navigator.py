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
The navigator: a state machine that holds one page of a fixed set of pages in
a single message, and lets users move between them using reactions (known as
"buttons").

Back and Forward move one page. Jump asks the user who pressed it to type a
page number. Delete removes the message and ends the session. If nobody
presses anything for ``timeout`` seconds, the buttons are removed and the
message is left showing whatever page it was on.

Example usage::

    nav = Navigator.create(
        DiscordTransport(ctx.bot),
        embeds,
        ctx.channel,
        authorised_user=ctx.author.id,
        timeout=120,
    )
    await nav.run()

"""

__all__ = ("Navigator",)

import asyncio
import functools
import typing

from mika import logging_utils
from mika.errors import CapabilityError
from mika.errors import ConfigurationError
from mika.errors import TransportError
from mika.pagination.abc import SessionABC
from mika.pagination.options import PaginationOptions
from mika.pagination.state import Action
from mika.pagination.state import Status
from mika.pagination.state import decide
from mika.pagination.state import indicator
from mika.pagination.state import needs_full_redraw
from mika.pagination.state import step
from mika.pagination.state import visible_actions
from mika.pagination.transport import REQUIRED_CAPABILITIES
from mika.pagination.transport import Content
from mika.pagination.transport import Event
from mika.pagination.transport import Identity
from mika.pagination.transport import Reply
from mika.pagination.transport import TimedOut
from mika.pagination.transport import Transport


class Navigator(SessionABC, logging_utils.Loggable):
    """
    Args:
        transport: the chat transport to drive.
        options: validated options, see :meth:`PaginationOptions.create`.

    Raises:
        ConfigurationError: if any page is not something the transport can render.
    """

    def __init__(self, transport: Transport, options: PaginationOptions):
        for i, page in enumerate(options.pages, start=1):
            if not isinstance(page, transport.payload_type):
                raise ConfigurationError(f"Page {i} is not a valid {transport.payload_type.__name__}.")

        super().__init__()
        self.transport = transport
        self.options = options
        self.pages = options.pages
        self.page_count = options.page_count
        self.current_page = options.initial_page
        self.surface = options.surface
        self.status = Status.BUILDING
        self._surface_deleted = False
        self._started = False

    @classmethod
    def create(cls, transport: Transport, pages: typing.Sequence, destination, **kwargs) -> "Navigator":
        """Validates the given options and builds a navigator from them."""
        return cls(transport, PaginationOptions.create(pages, destination, **kwargs))

    def __repr__(self):
        return (
            f"<{type(self).__name__} page={self.current_page}/{self.page_count} "
            f"status={self.status.name} surface={self.surface!r}>"
        )

    @property
    def is_alive(self) -> bool:
        return self.status is not Status.TERMINATED

    @property
    def current_payload(self):
        return self.pages[self.current_page - 1]

    def content(self) -> Content:
        """What the message should currently look like."""
        text = indicator(self.current_page, self.page_count) if self.options.show_page_indicator else None
        return Content(text=text, payload=self.current_payload)

    def start(self) -> asyncio.Task:
        """
        Runs the navigator in the background. Any failure is logged rather
        than being left on an unobserved task.
        """
        task = asyncio.create_task(self.run())
        task.add_done_callback(self._log_failure)
        return task

    def _log_failure(self, task: asyncio.Task):
        if not task.cancelled() and task.exception() is not None:
            self.logger.error("%r ended with an error", self, exc_info=task.exception())

    async def run(self) -> None:
        """
        Sends the first page and then handles reactions until the session is
        deleted or times out.

        Raises:
            CapabilityError: if the bot lacks the permissions it needs. No
                buttons will have been added.
            TransportError: if the chat service fails mid-session. The
                buttons are removed where possible before this is raised.
        """
        if self._started:
            raise RuntimeError("This navigator has already been started")
        self._started = True

        try:
            await self._publish()
            await self._check_capabilities()
            self.status = Status.ACTIVE
            self.logger.info("Started paginating %s pages on %r", self.page_count, self.surface)
            await self._draw_controls()
            await self._dispatch()
        except TransportError:
            await self._clear_after_failure()
            raise
        finally:
            self.status = Status.TERMINATED

    async def _publish(self):
        content = self.content()
        if self.surface is None:
            self.surface = await self.transport.publish(self.options.destination, content)
        else:
            await self.transport.edit(self.surface, content)

    async def _check_capabilities(self):
        granted = await self.transport.capabilities_of(self.options.destination)
        missing = REQUIRED_CAPABILITIES.difference(granted)
        if missing:
            raise CapabilityError(str(capability) for capability in missing)

    async def _draw_controls(self):
        for action in visible_actions(self.current_page, self.page_count):
            await self.transport.add_marker(self.surface, self.options.symbols.symbol_for(action))

    async def _dispatch(self):
        while self.status is Status.ACTIVE:
            event = await self.transport.await_event(self.surface, self._is_qualifying_event, self.options.timeout)

            if event is TimedOut:
                self.logger.info("%r timed out", self)
                await self.transport.clear_markers(self.surface)
                self.status = Status.TERMINATED
                return

            requested = self.options.symbols.action_for(event.symbol)
            action = decide(self.current_page, self.page_count, requested)
            self.logger.debug("%r received %s, performing %s", self, requested.name, action.name)

            if action is Action.DELETE:
                await self.transport.delete(self.surface)
                self._surface_deleted = True
                self.status = Status.TERMINATED
                self.logger.info("%r was deleted", self)
                return

            await self._retract(event)

            if action is Action.JUMP:
                await self._jump(event.identity)
            elif action is not Action.NO_OP:
                await self._turn_to(step(self.current_page, self.page_count, action))

    async def _jump(self, requester: Identity):
        self.status = Status.AWAITING_JUMP_INPUT
        destination = self.options.destination
        prompt = await self.transport.publish(destination, Content(text=self.options.jump_prompt))

        try:
            predicate = functools.partial(self._is_jump_reply, requester)
            reply = await self.transport.await_reply(destination, predicate, self.options.timeout)
        except TransportError:
            await self._discard(prompt)
            raise

        await self._discard(prompt)
        self.status = Status.ACTIVE

        if reply is TimedOut:
            self.logger.debug("%r gave up waiting for a page number", self)
            return

        await self._discard(reply.surface)

        text = reply.content.strip()
        if text.lower() == self.options.cancel_token:
            self.logger.debug("%r jump was cancelled", self)
            return

        await self._turn_to(int(text), forced=True)

    async def _turn_to(self, page: int, *, forced: bool = False):
        old_page, self.current_page = self.current_page, page
        self.logger.debug("%r moved from page %s", self, old_page)

        if needs_full_redraw(old_page, page, self.page_count, forced=forced):
            await self.transport.clear_markers(self.surface)
            await self.transport.edit(self.surface, self.content())
            await self._draw_controls()
        else:
            await self.transport.edit(self.surface, self.content())

    def _is_qualifying_event(self, event: Event) -> bool:
        return self.options.is_authorised(event.identity) and event.symbol in self.options.symbols

    def _is_jump_reply(self, requester: Identity, reply: Reply) -> bool:
        if reply.identity.id != requester.id:
            return False

        text = reply.content.strip()
        if text.lower() == self.options.cancel_token:
            return True

        try:
            page = int(text)
        except ValueError:
            return False

        return 1 <= page <= self.page_count and page != self.current_page

    async def _retract(self, event: Event):
        try:
            await self.transport.retract(self.surface, event)
        except TransportError as ex:
            self.logger.warning("Could not remove reaction %s: %s", event.symbol, ex)

    async def _discard(self, surface):
        if surface is None:
            return
        try:
            await self.transport.delete(surface)
        except TransportError as ex:
            self.logger.warning("Could not delete %r: %s", surface, ex)

    async def _clear_after_failure(self):
        if self.surface is None or self._surface_deleted:
            return
        try:
            await self.transport.clear_markers(self.surface)
        except TransportError:
            self.logger.exception("Could not remove reactions from %r after a failure", self.surface)
