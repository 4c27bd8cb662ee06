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
Holds the bot implementation.
"""
import time
import typing

import discord
from discord.ext import commands

from mika import logging_utils
from mika import pagination

__all__ = ("BotInterrupt", "Bot", "DEFAULT_EXTENSIONS")

# Sue me.
BotInterrupt = KeyboardInterrupt

MAX_MESSAGES = 300

DEFAULT_EXTENSIONS = ("mika.features.error_handler", "mika.features.leaderboard")


###############################################################################
# Bot class definition.                                                       #
###############################################################################
class Bot(commands.Bot, logging_utils.Loggable):
    """
    My implementation of the Discord.py bot. This logs the lifecycle of
    commands, cogs and extensions, and loads the configured extensions before
    connecting.

    :param bot_config:
        This accepts a dict with these members:
        - ``auth`` - this must contain a ``token`` member.
        - ``bot`` - this contains a group of kwargs to pass to the Discord.py
            Bot constructor.
        - ``extensions`` - optional. Dotted names of the extensions to load.
            Defaults to ``DEFAULT_EXTENSIONS``.
    """

    def __init__(self, bot_config: dict):
        intents = discord.Intents.default()
        intents.message_content = True
        intents.reactions = True

        commands.Bot.__init__(self, **bot_config.get("bot", {}), intents=intents, max_messages=MAX_MESSAGES)

        self.token = bot_config["auth"]["token"]
        self.extensions_to_load: typing.Sequence[str] = bot_config.get("extensions", DEFAULT_EXTENSIONS)
        self.command_invoke_count = 0

        self.logger.info("Using command prefix: %s", self.command_prefix)

    @property
    def up_time(self) -> float:
        """Returns how many seconds the bot has been up for."""
        curr = time.time()
        return curr - getattr(self, "start_time", curr)

    async def setup_hook(self):
        for extension in self.extensions_to_load:
            await self.load_extension(extension)

    async def run_forever(self):
        """Starts the bot with the stored token."""
        setattr(self, "start_time", time.time())
        async with self:
            await self.start(self.token)

    async def close(self):
        """Logs how many pagination sessions are being abandoned, then closes the connection."""
        live = pagination.Navigator.live_sessions()
        if live:
            self.logger.warning("Shutting down with %s pagination sessions still waiting for input", len(live))
        await super().close()

    async def load_extension(self, name, *, package=None):
        """
        Overrides the default behaviour by logging info about the extension
        that is being loaded.
        """
        self.logger.debug("Loading extension %r", name)
        await super().load_extension(name, package=package)

    async def add_cog(self, cog, **kwargs):
        self.logger.debug("Loading cog %r", type(cog).__name__)
        await super().add_cog(cog, **kwargs)

    async def on_ready(self):
        self.logger.info("Logged in as %s, in %s guilds", self.user, len(self.guilds))

    async def on_command(self, ctx):
        self.command_invoke_count += 1
        if ctx.guild:
            self.logger.debug(
                "A user invoked %s in %s#%s (%s#%s) (message ID: %s)",
                ctx.message.content.replace("@", "@-"),
                ctx.guild,
                ctx.channel,
                ctx.guild.id,
                ctx.channel.id,
                ctx.message.id,
            )
        else:
            self.logger.debug(
                "A user invoked %s in private messages (message ID: %s)",
                ctx.message.content.replace("@", "@-"),
                ctx.message.id,
            )
