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
Singleton pattern implementation for creating unique one-instance objects
from classes on demand. Mostly useful for sentinels such as
:obj:`mika.pagination.transport.TimedOut`.

Note:
    ``class Foo(Singleton)`` is analogous to ``class Foo(metaclass=SingletonMeta)``.

Example usage:

    >>> class Nothing(Singleton):
    ...     pass

    >>> Nothing() is Nothing()
    True

"""

__all__ = ("SingletonMeta", "Singleton")


def _singleton_repr(t: type):
    return f"<{t.__name__}>"


class SingletonMeta(type):
    """
    Metaclass that enforces the Singleton pattern.
    """

    __singletons = {}

    def __call__(cls):
        try:
            return cls.__singletons[cls]
        except KeyError:
            singleton = super(SingletonMeta, cls).__call__()
            cls.__singletons[cls] = singleton
            return singleton

    def __repr__(cls):
        return _singleton_repr(cls)

    __str__ = __repr__


class Singleton(metaclass=SingletonMeta):
    """Less verbose way of implementing a singleton class."""

    __slots__ = ()

    def __repr__(self):
        return _singleton_repr(type(self))

    __str__ = __repr__

    def __eq__(self, other):
        return other is self

    def __hash__(self):
        return hash(type(self))
