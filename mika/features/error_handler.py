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
Reports command failures back to whoever invoked the command.

Each handler is tagged with the exception types it deals with. When a
command fails, the most specific handler for the underlying cause is used.
"""
import contextlib
import datetime
import inspect
import traceback
import typing
import uuid

import discord
from discord.ext import commands

from mika import cog
from mika import errors


def mark_as_handler(ex_type, *ex_types):
    """Marks a coroutine method as the handler for the given exception types."""

    def decorator(func):
        assert inspect.iscoroutinefunction(func), "Handler must be a coroutine function"
        func.__error_handler_for__ = (ex_type, *ex_types)
        return func

    return decorator


def is_handler(obj) -> bool:
    return inspect.iscoroutinefunction(obj) and bool(getattr(obj, "__error_handler_for__", ()))


# discord.py failures that are safe to echo to the user as they are.
USER_FACING_COMMAND_ERRORS = (
    commands.NotOwner,
    commands.MissingRequiredArgument,
    commands.BadArgument,
    commands.BotMissingPermissions,
    commands.MissingPermissions,
    commands.NoPrivateMessage,
    commands.TooManyArguments,
    errors.NotFound,
)


class ErrorHandlerCog(cog.CogBase):
    def __init__(self, bot):
        super().__init__(bot)
        self.handlers: typing.Dict[type, typing.Callable] = {}
        for _, handler in inspect.getmembers(self, is_handler):
            self.handlers.update(dict.fromkeys(handler.__error_handler_for__, handler))

        self.logger.info("Registered exception handlers for %s scenarios", len(self.handlers))

    def handler_for(self, error: BaseException) -> typing.Optional[typing.Callable]:
        for klass in type(error).__mro__:
            if klass in self.handlers:
                return self.handlers[klass]
        return None

    @cog.CogBase.listener()
    async def on_command_error(self, ctx, error):
        self.logger.debug("Handling exception", exc_info=error)

        # Command invocation failures wrap the real error.
        if error.__cause__ is not None and not isinstance(error, commands.BadArgument):
            error = error.__cause__

        handler = self.handler_for(error)
        if handler is not None:
            await handler(ctx, error)

    @mark_as_handler(commands.CommandNotFound)
    async def on_unknown_command(self, ctx, _):
        await ctx.message.add_reaction("\N{BLACK QUESTION MARK ORNAMENT}")

    @mark_as_handler(commands.DisabledCommand, commands.CheckFailure)
    async def on_not_allowed(self, ctx, _):
        await ctx.message.add_reaction("\N{NO ENTRY SIGN}")

    @mark_as_handler(*USER_FACING_COMMAND_ERRORS)
    async def on_user_facing_error(self, ctx, error):
        message = str(error).strip()
        if message:
            await ctx.send(message)

    @mark_as_handler(errors.ConfigurationError)
    async def on_bad_pagination_options(self, ctx, error):
        self.logger.debug("Refused to paginate for %s: %s", ctx.author, error)
        await ctx.send(str(error))

    @mark_as_handler(errors.CapabilityError)
    async def on_missing_capabilities(self, ctx, error):
        self.logger.info("Missing %s in %s", ", ".join(error.missing), ctx.channel)
        listing = "\n".join(f"\N{BULLET} {name}" for name in error.missing)
        await ctx.send(f"Cannot paginate without required permissions:\n{listing}")

    @mark_as_handler(errors.HttpError)
    async def on_upstream_api_error(self, ctx, error):
        self.logger.warning("Upstream API responded with %s", error)
        await ctx.send(f"The API I asked did not respond properly ({error}). Try again later.")

    @mark_as_handler(errors.TransportError)
    async def on_transport_error(self, ctx, error):
        ref = uuid.uuid4()
        self.logger.error("Pagination session failed! UUID: %s", ref, exc_info=error)
        # The channel itself may be gone.
        with contextlib.suppress(discord.HTTPException):
            await ctx.send(f"I lost track of that message, sorry.\n\n> Ref: `{ref}`")

    @mark_as_handler(Exception)
    async def on_unhandled_exception(self, ctx, error):
        ref = uuid.uuid4()
        self.logger.exception("Unhandled exception! UUID: %s", ref, exc_info=error)
        await ctx.send(f"Uh oh, something unexpected went wrong! I've DM'ed this to my owner!\n\n> Ref: `{ref}`")
        await self.report_to_owner(error, ref)

    async def report_to_owner(self, error, ref):
        lines = traceback.format_exception(type(error), error, error.__traceback__)
        paginator = commands.Paginator()
        paginator.add_line(f"Exception report {ref} at {datetime.datetime.now(datetime.timezone.utc)}")
        paginator.add_line("")
        for line in "".join(lines).splitlines():
            paginator.add_line(line)

        try:
            owner = (await self.bot.application_info()).owner
            for page in paginator.pages:
                await owner.send(page)
        except discord.HTTPException:
            self.logger.exception("Could not send exception report %s to the owner", ref)


setup = ErrorHandlerCog.create_setup()
