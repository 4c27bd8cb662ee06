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
Pure state-transition rules for a paginated session.

Nothing in here touches the transport. Pages are 1-indexed throughout.
"""

__all__ = ("Status", "Action", "decide", "step", "resolve_page", "visible_actions", "needs_full_redraw", "indicator")

import enum
import typing


class Status(enum.Enum):
    BUILDING = enum.auto()
    ACTIVE = enum.auto()
    AWAITING_JUMP_INPUT = enum.auto()
    TERMINATED = enum.auto()


class Action(enum.Enum):
    BACK = "back"
    JUMP = "jump"
    FORWARD = "forward"
    DELETE = "delete"
    NO_OP = "no-op"


# Order the buttons are drawn in.
DRAW_ORDER = (Action.BACK, Action.JUMP, Action.FORWARD, Action.DELETE)


def decide(page: int, page_count: int, action: Action) -> Action:
    """
    Returns the action that should actually be carried out when ``action`` is
    requested on ``page``. Requests that make no sense for the current
    position degrade to :attr:`Action.NO_OP`.
    """
    if action is Action.BACK and page <= 1:
        return Action.NO_OP
    if action is Action.FORWARD and page >= page_count:
        return Action.NO_OP
    if action is Action.JUMP and page_count <= 2:
        return Action.NO_OP
    return action


def step(page: int, page_count: int, action: Action) -> int:
    """The page reached by moving once in the given direction, clamped at either end."""
    if action is Action.BACK:
        return max(1, page - 1)
    if action is Action.FORWARD:
        return min(page_count, page + 1)
    return page


def resolve_page(requested: typing.Union[int, str], page: int, page_count: int) -> typing.Optional[int]:
    """
    Resolves a requested page relative to the current one.

    ``requested`` may be a page number, a string holding a page number, or one
    of the tokens ``"back"`` and ``"forward"``. Returns ``None`` if the request
    is not understood or is out of range.
    """
    if isinstance(requested, bool):
        return None

    if isinstance(requested, str):
        token = requested.strip().lower()
        if token in ("back", "forward"):
            return step(page, page_count, Action(token))
        try:
            requested = int(token)
        except ValueError:
            return None

    if isinstance(requested, int) and 1 <= requested <= page_count:
        return requested

    return None


def visible_actions(page: int, page_count: int) -> typing.Tuple[Action, ...]:
    """
    Buttons that should be shown on the given page, in the order they are
    drawn. Back is hidden on the first page, Forward on the last, and Jump is
    only worth showing with more than two pages. Delete is always shown.
    """
    shown = {
        Action.BACK: page != 1,
        Action.JUMP: page_count > 2,
        Action.FORWARD: page != page_count,
        Action.DELETE: True,
    }
    return tuple(action for action in DRAW_ORDER if shown[action])


def needs_full_redraw(old_page: int, new_page: int, page_count: int, *, forced: bool = False) -> bool:
    """
    True if the buttons must be cleared and redrawn when moving between pages.

    The visible set only changes when a boundary page is involved. Jumps pass
    ``forced=True`` as they can land anywhere.
    """
    if forced:
        return True
    boundaries = (1, page_count)
    return old_page in boundaries or new_page in boundaries


def indicator(page: int, page_count: int) -> typing.Optional[str]:
    """Text shown above the embed, or ``None`` if there is only one page."""
    if page_count == 1:
        return None
    return f"Page {page} of {page_count}"
