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
Loggable class.
"""
import logging

__all__ = ("Loggable",)


class Loggable:
    """
    Adds functionality to a class to allow it to log information.

    Loggers are named after the module and qualified class name, so everything
    in this package sits beneath the ``mika`` logger and can be tuned in one
    place.
    """

    logger: logging.Logger

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.logger: logging.Logger = logging.getLogger(f"{cls.__module__}.{cls.__qualname__}")
