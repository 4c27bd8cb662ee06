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
Handles reading config files.
"""
import io  # Streams
import json
import os  # File operations
import typing  # Type checking

import aiofiles  # Async file IO
import yaml

from mika import logging_utils

__all__ = ("CONFIG_DIRECTORY", "ConfigFile", "get_from_config_dir", "get_config_data")

CONFIG_DIRECTORY = os.getenv("MIKA_CONFIG_DIRECTORY", "./config")

# Functions to call to deserialize each type.
deserializers = {".json": json.load, ".yaml": yaml.safe_load, ".yml": yaml.safe_load}


class ConfigFile(logging_utils.Loggable):
    """
    Read-only view of a JSON or YAML file holding feature settings, such as
    the Kamihime API location. Files are read at most once and then served
    from memory until :meth:`invalidate` is called.

    The extension may be left off: asking for `kamihime` picks up
    `kamihime.json`, `kamihime.yaml` or `kamihime.yml`, whichever exists first.

    :param path: the file to read, with or without its extension.
    :param should_guess: set to false to require the exact path to exist.
    """

    def __init__(self, path, *, should_guess=True):
        if not path:
            raise ValueError("Not a valid path")

        path, ext = self._get_extension(path, should_guess)

        if not os.access(path, os.R_OK):
            raise PermissionError(f"I do not have read access to {path!r}.")

        self.path = path
        self.deserializer = deserializers[ext]
        self._value = None

    @staticmethod
    def _get_extension(base: str, should_guess: bool = True) -> typing.Tuple[str, str]:
        """
        Resolves the config file, guessing the extension if ``base`` has none
        we recognise. We return the first match for the file name, with the
        extension. If nothing can be found, then an exception is raised.
        """
        for ext in deserializers:
            if os.path.isfile(base) and base.endswith(ext):
                return base, ext
            elif should_guess and os.path.isfile(base + ext):
                return base + ext, ext

        if not os.path.exists(base):
            raise FileNotFoundError(f"{base!r} does not exist.")
        elif not os.path.isfile(base):
            raise TypeError(f"{base!r} is not a valid file.")
        else:
            raise NotImplementedError(f"No deserialiser is defined for {base!r}")

    @property
    def _deserializer_name(self):
        return f"{self.deserializer.__module__}.{self.deserializer.__name__}"

    async def async_get(self):
        """Asynchronously reads the config from file."""
        if self._value is None:
            self.logger.info("Asynchronously deserialising %s using %s", self.path, self._deserializer_name)
            async with aiofiles.open(self.path) as fp:
                with io.StringIO(await fp.read()) as str_io:
                    self._value = self.deserializer(str_io)
        return self._value

    def sync_get(self):
        """Blocks while we read the config from the file."""
        if self._value is None:
            self.logger.info("Deserialising %s using %s", self.path, self._deserializer_name)
            with open(self.path) as fp:
                self._value = self.deserializer(fp)
        return self._value

    def invalidate(self):
        """
        Invalidates the cache. This causes the next read to cause a new file
        read operation.
        """
        old = self._value
        self._value = None
        return old

    @property
    def is_cached(self):
        return self._value is not None


def get_from_config_dir(file_name, *, load_now=True, directory=None):
    """
    Constructs a ConfigFile from the configuration directory, and caches the
    data.

    :param file_name: the file to open in the configuration directory.
    :param load_now: true if we should immediately cache. Defaults to True.
    :param directory: overrides ``CONFIG_DIRECTORY``.
    :returns: a ConfigFile object.
    """
    path = os.path.join(directory or CONFIG_DIRECTORY, file_name)
    cf = ConfigFile(path)

    if load_now:
        cf.sync_get()
    return cf


def get_config_data(file_name, *, directory=None):
    """Quickly fetches the config data from the config directory."""
    return get_from_config_dir(file_name, load_now=False, directory=directory).sync_get()
