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
Abstract base classes for the pagination module.
"""

__all__ = ("SessionABC",)

import weakref
from abc import ABC
from abc import abstractmethod


class SessionABC(ABC):
    """
    Keeps track of the references to every live session. Useful for working
    out how many navigators are still waiting on users.

    The weak references are dealt with automatically internally, so you
    never even have to acknowledge its existence.
    """

    _instances = weakref.WeakSet()

    def __init__(self):
        self._instances.add(self)

    @classmethod
    def live_sessions(cls) -> list:
        """All sessions of this type that have not been garbage collected or terminated."""
        return [session for session in list(cls._instances) if isinstance(session, cls) and session.is_alive]

    @property
    @abstractmethod
    def is_alive(self) -> bool:
        ...
