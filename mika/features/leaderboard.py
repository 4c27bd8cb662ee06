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
Kamihime leaderboard: the most peeked-at harem scenes, paginated.
"""
import typing

from discord.ext import commands

from mika import cog
from mika import configuration_files
from mika import errors
from mika.pagination import FieldNavigatorFactory

DEFAULT_TIMEOUT = 240

HELP_TEXT = "React with the emoji below to navigate. \N{NORTH EAST ARROW} to skip a page."

ADVANCED_FLAGS = ("--dev", "--advanced")


def flatten(grouped: typing.Mapping[str, typing.Iterable[dict]]) -> typing.List[dict]:
    """The API groups characters by type; we just want one list of them."""
    return [entry for group in grouped.values() for entry in group]


def rank(entries: typing.Iterable[dict]) -> typing.List[dict]:
    """Drops anything nobody has looked at, most viewed first."""
    return sorted((e for e in entries if e.get("peekedOn", 0) != 0), key=lambda e: e["peekedOn"], reverse=True)


def leaderboard_factory(ranked: typing.List[dict], *, advanced: bool = False) -> FieldNavigatorFactory:
    factory = FieldNavigatorFactory(ranked, title="Most Views Leaderboard (Harem Scenes)", colour=0xFF00AE)

    if advanced:
        factory.format_field("#) ID", lambda entry, i: f"{i + 1}) {entry['khID']}")
        factory.format_field("Name", lambda entry, i: entry["khName"])
    else:
        factory.format_field("#) Name", lambda entry, i: f"{i + 1}) {entry['khName']}")

    factory.format_field("Views", lambda entry, i: entry["peekedOn"])
    factory.add_field("Help", HELP_TEXT)
    return factory


class LeaderboardCog(cog.CogBase):
    """Kamihime DB leaderboards."""

    def __init__(self, bot, config: typing.Mapping = None):
        super().__init__(bot)
        if config is None:
            config = configuration_files.get_config_data("kamihime")
        self.api_url = config["api_url"]
        self.loading = config.get("loading_emoji", "\N{HOURGLASS WITH FLOWING SAND}")
        self.timeout = config.get("timeout", DEFAULT_TIMEOUT)

    async def fetch_entries(self) -> typing.List[dict]:
        async with self.acquire_http_session() as session:
            async with session.get(f"{self.api_url}list") as resp:
                if resp.status != 200:
                    raise errors.HttpError(resp)
                return flatten(await resp.json())

    @commands.command(
        name="leaderboard",
        aliases=["lb", "toppeeks", "top"],
        brief="Displays leaderboard of kamihime for top views on harem scenes.",
        usage="[page number] [--advanced]",
    )
    async def leaderboard_command(self, ctx, page: typing.Optional[int] = 1, *flags: str):
        """
        Shows the most viewed harem scenes, starting on the given page. Pass
        `--advanced` to also show character IDs.
        """
        advanced = any(flag.lower() in ADVANCED_FLAGS for flag in flags)

        loading = await ctx.send(f"{self.loading} Awaiting Kamihime DB's response...")

        try:
            ranked = rank(await self.fetch_entries())
            if not ranked:
                raise errors.NotFound("Nobody has peeked at anything yet.")

            self.logger.debug("Ranked %s entries for %s", len(ranked), ctx.author)

            navigator = leaderboard_factory(ranked, advanced=advanced).build(
                self.transport,
                ctx.channel,
                authorised_user=ctx.author.id,
                initial_page=page,
                timeout=self.timeout,
                surface=loading,
            )
        except Exception:
            # The error handler reports the failure in its own message.
            await self.remove_loading_message(loading)
            raise

        await navigator.run()

    async def remove_loading_message(self, loading):
        try:
            await self.transport.delete(loading)
        except errors.TransportError as ex:
            self.logger.warning("Could not remove loading message %r: %s", loading, ex)


setup = LeaderboardCog.create_setup()
