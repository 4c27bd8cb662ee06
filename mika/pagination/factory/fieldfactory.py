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
Builds embed pages from a flat list of items, where each page shows a column
per field, and then hands them to a :class:`Navigator`.
"""

__all__ = ("FieldNavigatorFactory", "FIELD_VALUE_LIMIT")

import typing

import discord

from mika import logging_utils
from mika import string
from mika.errors import ConfigurationError
from mika.pagination.navigator import Navigator
from mika.pagination.transport import Transport

FIELD_VALUE_LIMIT = 1024

Formatter = typing.Callable[[typing.Any, int], typing.Any]


class FieldNavigatorFactory(logging_utils.Loggable):
    """
    Lays items out across as many embeds as needed, ``items_per_page`` at a
    time.

    Each formatted field is called with ``(item, index)`` for every item on
    the page, where ``index`` is the position of the item in the whole list
    (starting at 0). This lets callers number things without the navigator
    knowing what the pages contain.

    Example usage::

       fnf = FieldNavigatorFactory(characters, title="Most viewed")
       fnf.format_field("#) Name", lambda c, i: f"{i + 1}) {c['name']}")
       fnf.format_field("Views", lambda c, i: c["views"])
       fnf.add_field("Help", "React below to navigate.")

       await fnf.build(transport, ctx.channel).run()

    """

    def __init__(
        self,
        items: typing.Iterable = (),
        *,
        title: str = None,
        colour: typing.Union[int, discord.Colour] = None,
        items_per_page: int = 10,
    ):
        if isinstance(items_per_page, bool) or not isinstance(items_per_page, int) or items_per_page < 1:
            raise ConfigurationError("items_per_page must be a positive integer.")

        self.items = list(items)
        self.title = title
        self.colour = colour
        self.items_per_page = items_per_page
        self._formatted_fields: typing.List[typing.Tuple[str, Formatter, bool]] = []
        self._static_fields: typing.List[typing.Tuple[str, str, bool]] = []

    def format_field(self, name: str, formatter: Formatter, *, inline: bool = True) -> "FieldNavigatorFactory":
        """Adds a column whose lines are produced by ``formatter(item, index)``."""
        self._formatted_fields.append((name, formatter, inline))
        return self

    def add_field(self, name: str, value: str, *, inline: bool = False) -> "FieldNavigatorFactory":
        """Adds a field shown unchanged underneath the columns on every page."""
        self._static_fields.append((name, value, inline))
        return self

    @property
    def pages(self) -> typing.List[discord.Embed]:
        if not self.items:
            raise ConfigurationError("Cannot build pages without any items.")
        if not self._formatted_fields:
            raise ConfigurationError("Cannot build pages without any formatted fields.")

        pages = []
        for start in range(0, len(self.items), self.items_per_page):
            chunk = self.items[start : start + self.items_per_page]
            embed = discord.Embed(title=self.title, colour=self.colour)

            for name, formatter, inline in self._formatted_fields:
                lines = (str(formatter(item, index)) for index, item in enumerate(chunk, start=start))
                value = string.trunc("\n".join(lines), FIELD_VALUE_LIMIT) or "\N{ZERO WIDTH SPACE}"
                embed.add_field(name=name, value=value, inline=inline)

            for name, value, inline in self._static_fields:
                embed.add_field(name=name, value=value, inline=inline)

            pages.append(embed)

        self.logger.debug("Laid out %s items over %s pages", len(self.items), len(pages))
        return pages

    def build(self, transport: Transport, destination, **kwargs) -> Navigator:
        """
        Args:
            transport: the transport the navigator should drive.
            destination: where to send the pages.

        Kwargs:
            any option accepted by :meth:`PaginationOptions.create`.
        """
        return Navigator.create(transport, self.pages, destination, **kwargs)

    def start(self, transport: Transport, destination, **kwargs):
        """
        Same as performing ``.build(...).start()``
        """
        return self.build(transport, destination, **kwargs).start()
