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
Utilities for browsing a fixed set of pre-rendered pages inside a single
Discord message.

The navigator is a state machine that holds a certain page, and provides
Discord reactions (known as "buttons") that have actions associated with them.
When an authorised user interacts with said reaction, the bot will remove the
reaction and perform the given task. This enables navigation through many
pages while only displaying one message at a time.

The navigator only ever talks to an abstract transport. The Discord-backed one
lives in :mod:`mika.pagination.discord_transport`.
"""

from .abc import *
from .discord_transport import *
from .factory.fieldfactory import *
from .navigator import *
from .options import *
from .state import *
from .transport import *
