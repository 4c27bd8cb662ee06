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
Application entry point. Reads the bot settings from the environment,
configures logging, loads the feature extensions and then starts the bot.

Feature configuration files are read from ``MIKA_CONFIG_DIRECTORY``
(``./config`` by default).
"""
import asyncio
import logging
import os

from mika import bot as client

LOGGERS_TO_SUPPRESS = ["discord.http"]

SUPPRESS_TO_LEVEL = "FATAL"


def cli():
    MIKA_TOKEN = os.environ["MIKA_TOKEN"]
    MIKA_OWNER_ID = os.getenv("MIKA_OWNER_ID")
    MIKA_PREFIX = os.getenv("MIKA_PREFIX", "m++")

    bot_kwargs = dict(command_prefix=MIKA_PREFIX)
    if MIKA_OWNER_ID:
        bot_kwargs["owner_id"] = int(MIKA_OWNER_ID)

    config = dict(bot=bot_kwargs, auth=dict(token=MIKA_TOKEN))

    logging_kwargs = {
        "level": os.getenv("LOGGER_LEVEL", "INFO"),
        "format": "%(asctime)s.%(msecs)03d L:%(levelname)s M:%(module)s F:%(funcName)s: %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    }

    logging.basicConfig(**logging_kwargs)
    logger = logging.getLogger("mika")

    for other_logger in LOGGERS_TO_SUPPRESS:
        other_logger = logging.getLogger(other_logger)
        other_logger.setLevel(SUPPRESS_TO_LEVEL)

    bot = client.Bot(config)

    try:
        asyncio.run(bot.run_forever())
    except client.BotInterrupt as ex:
        logger.critical("Received interrupt %r", ex)
    except Exception as ex:
        logger.exception("An unrecoverable error occurred.", exc_info=ex)
    else:
        logger.info("The bot stopped executing as expected")
    finally:
        logger.critical("Process is terminating NOW.")


if __name__ == "__main__":
    cli()
