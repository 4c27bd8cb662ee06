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
String manipulation utilities.
"""

__all__ = ("trunc",)


def trunc(text: str, max_length: int = 2000, *, ellipsis: str = "...") -> str:
    """Truncates output if it is too long, marking the cut with ``ellipsis``."""
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ellipsis)] + ellipsis
