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
Implementations of errors.
"""

__all__ = (
    "HttpError",
    "NotFound",
    "PaginationError",
    "ConfigurationError",
    "CapabilityError",
    "TransportError",
)

import typing


class HttpError(RuntimeError):
    def __init__(self, response):
        self.response = response

    @property
    def reason(self) -> str:
        return self.response.reason

    @property
    def status(self) -> int:
        return self.response.status

    def __str__(self):
        return f"{self.status}: {self.reason}"


class NotFound(RuntimeError):
    def __init__(self, message=None):
        self.message = message if message else "No valid result was found"

    def __str__(self):
        return self.message


class PaginationError(RuntimeError):
    """Base for anything a paginated session can fail with."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message


class ConfigurationError(PaginationError):
    """
    Raised when a paginated session is given invalid options. This is always
    raised before anything is sent to the chat, so it is safe to show the
    message to the user verbatim.
    """


class CapabilityError(PaginationError):
    """
    Raised when the bot lacks permissions needed to manage reactions or
    messages in the destination channel. No reactions will have been added.
    """

    def __init__(self, missing: typing.Iterable[str]):
        self.missing = tuple(sorted(map(str, missing)))
        super().__init__(f"Cannot paginate without required permissions: {', '.join(self.missing)}")


class TransportError(PaginationError):
    """
    Any failure talking to the chat service while a session is running, such
    as the message being deleted from under us or permissions being revoked.
    The original exception is chained as ``__cause__`` where there is one.
    """
