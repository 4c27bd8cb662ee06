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
Validated, immutable options for a paginated session.
"""

__all__ = ("NavigationSymbols", "PaginationOptions", "DEFAULT_TIMEOUT", "DEFAULT_JUMP_PROMPT", "not_a_bot")

import numbers
import typing
from dataclasses import dataclass
from dataclasses import field

from mika.errors import ConfigurationError
from mika.pagination.state import Action
from mika.pagination.state import resolve_page
from mika.pagination.transport import Identity

DEFAULT_TIMEOUT = 30.0

DEFAULT_JUMP_PROMPT = "To what page would you like to jump? Say `cancel` to cancel the prompt."


def not_a_bot(identity: Identity) -> bool:
    return not identity.is_bot


@dataclass(frozen=True)
class NavigationSymbols:
    """The reactions bound to each action."""

    back: str = "\N{BLACK LEFT-POINTING TRIANGLE}"
    jump: str = "\N{NORTH EAST ARROW}"
    forward: str = "\N{BLACK RIGHT-POINTING TRIANGLE}"
    delete: str = "\N{WASTEBASKET}"

    def __post_init__(self):
        symbols = (self.back, self.jump, self.forward, self.delete)
        if not all(isinstance(s, str) and s for s in symbols):
            raise ConfigurationError("Every navigation symbol must be a non-empty string.")
        if len(set(symbols)) != len(symbols):
            raise ConfigurationError(f"Navigation symbols must all be different, got {', '.join(symbols)}.")

    def symbol_for(self, action: Action) -> str:
        return getattr(self, action.value)

    def action_for(self, symbol: str) -> typing.Optional[Action]:
        for action in (Action.BACK, Action.JUMP, Action.FORWARD, Action.DELETE):
            if self.symbol_for(action) == symbol:
                return action
        return None

    def __contains__(self, symbol):
        return self.action_for(symbol) is not None


@dataclass(frozen=True)
class PaginationOptions:
    """
    Everything a navigator needs to know before it starts. Use :meth:`create`
    rather than constructing this directly; it validates everything up front
    and raises :class:`ConfigurationError` on bad input.
    """

    pages: typing.Tuple[typing.Any, ...]
    destination: typing.Any
    initial_page: int = 1
    authorised_user: typing.Optional[int] = None
    identity_filter: typing.Callable[[Identity], bool] = not_a_bot
    symbols: NavigationSymbols = field(default_factory=NavigationSymbols)
    timeout: float = DEFAULT_TIMEOUT
    show_page_indicator: bool = True
    surface: typing.Any = None
    jump_prompt: str = DEFAULT_JUMP_PROMPT
    cancel_token: str = "cancel"

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @classmethod
    def create(
        cls,
        pages: typing.Sequence[typing.Any],
        destination,
        *,
        initial_page: typing.Union[int, str] = 1,
        authorised_user: typing.Any = None,
        identity_filter: typing.Callable[[Identity], bool] = not_a_bot,
        symbols: typing.Union[NavigationSymbols, typing.Mapping[str, str], None] = None,
        timeout: float = DEFAULT_TIMEOUT,
        show_page_indicator: bool = True,
        surface=None,
        jump_prompt: str = DEFAULT_JUMP_PROMPT,
        cancel_token: str = "cancel",
    ) -> "PaginationOptions":
        """
        Args:
            pages: the pages to browse. Must not be empty.
            destination: where to send the message.
            initial_page: the 1-based page to open on, or ``"back"``/``"forward"``
                relative to the first page.
            authorised_user: the only user allowed to navigate, given as an ID or
                anything with an integer ``id`` such as a member. If omitted,
                anyone passing ``identity_filter`` can.
            identity_filter: who may navigate when there is no authorised user.
                Defaults to anyone who is not a bot.
            symbols: the reactions to use, either as :class:`NavigationSymbols`
                or a mapping with all of ``back``, ``jump``, ``forward`` and
                ``delete``.
            timeout: seconds of inactivity to wait for before giving up.
            show_page_indicator: whether to show "Page x of y" above the page.
            surface: an existing message to take over instead of sending one.
            jump_prompt: text to prompt for a page number with.
            cancel_token: word that cancels the jump prompt.
        """
        if isinstance(pages, (str, bytes)) or not isinstance(pages, typing.Sequence):
            raise ConfigurationError("Pages must be given as a sequence.")
        pages = tuple(pages)
        if not pages:
            raise ConfigurationError("Cannot paginate without any pages.")

        if destination is None:
            raise ConfigurationError("Cannot paginate without a destination.")

        page = resolve_page(initial_page, 1, len(pages))
        if page is None:
            raise ConfigurationError(f"Invalid page {initial_page!r}, expected 1 to {len(pages)}.")

        if isinstance(timeout, bool) or not isinstance(timeout, numbers.Real) or not timeout > 0:
            raise ConfigurationError(f"Timeout must be a positive number of seconds, not {timeout!r}.")

        if symbols is None:
            symbols = NavigationSymbols()
        elif not isinstance(symbols, NavigationSymbols):
            missing = {"back", "jump", "forward", "delete"} - set(symbols)
            if missing:
                raise ConfigurationError(f"Missing navigation symbols for {', '.join(sorted(missing))}.")
            symbols = NavigationSymbols(**{k: symbols[k] for k in ("back", "jump", "forward", "delete")})

        if authorised_user is not None:
            # Identities, discord.py members and users all carry an id.
            authorised_user = getattr(authorised_user, "id", authorised_user)
            if isinstance(authorised_user, bool) or not isinstance(authorised_user, int):
                raise ConfigurationError(f"Cannot authorise {authorised_user!r}, expected a user or user ID.")

        if not callable(identity_filter):
            raise ConfigurationError("The identity filter must be callable.")

        if not isinstance(show_page_indicator, bool):
            raise ConfigurationError("show_page_indicator must be a boolean.")

        if not isinstance(cancel_token, str) or not cancel_token.strip():
            raise ConfigurationError("The cancel token must be a non-empty string.")

        if not isinstance(jump_prompt, str) or not jump_prompt.strip():
            raise ConfigurationError("The jump prompt must be a non-empty string.")

        return cls(
            pages=pages,
            destination=destination,
            initial_page=page,
            authorised_user=authorised_user,
            identity_filter=identity_filter,
            symbols=symbols,
            timeout=float(timeout),
            show_page_indicator=show_page_indicator,
            surface=surface,
            jump_prompt=jump_prompt,
            cancel_token=cancel_token.strip().lower(),
        )

    def is_authorised(self, identity: Identity) -> bool:
        if self.authorised_user is not None:
            return identity.id == self.authorised_user
        return self.identity_filter(identity)
