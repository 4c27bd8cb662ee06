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
Base class for cogs, holding the shared resources they may want.
"""
import aiohttp
from discord.ext import commands

from mika import logging_utils
from mika.pagination import discord_transport


class CogBase(logging_utils.Loggable, commands.Cog):
    """Contains any shared resource traits we may want to acquire."""

    def __init__(self, bot):
        super().__init__()
        self.bot = bot
        self.transport = discord_transport.DiscordTransport(bot)

    @classmethod
    def acquire_http_session(cls):
        """
        Acquires a new HTTP client session. This must be closed after use to
        avoid leaving connections open.
        """
        return aiohttp.ClientSession()

    @classmethod
    def create_setup(cls):
        async def setup(bot):
            await bot.add_cog(cls(bot))

        return setup
