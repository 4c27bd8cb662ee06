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
Mika: a Discord bot that lets users browse pre-rendered pages of content
inside a single message, navigating with reactions.
"""

__author__ = "Natsurii Labs"
__repository__ = "https://github.com/Natsurii/nicabot-monkee"
__version__ = "0.5.0"
__license__ = "GPL-3.0"
