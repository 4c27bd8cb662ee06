"""Tests for reporting command failures."""

from unittest import mock

import pytest
from discord.ext import commands

from mika import errors
from mika.features.error_handler import ErrorHandlerCog
from mika.features.error_handler import is_handler
from mika.features.error_handler import mark_as_handler
from mika.pagination.transport import Capability


@pytest.fixture
def handler():
    return ErrorHandlerCog(mock.MagicMock())


@pytest.fixture
def ctx():
    ctx = mock.MagicMock()
    ctx.send = mock.AsyncMock()
    ctx.message.add_reaction = mock.AsyncMock()
    return ctx


def invoke_error(original):
    error = commands.CommandInvokeError(original)
    error.__cause__ = original
    return error


class TestMarkAsHandler:
    """Tests for tagging handler coroutines."""

    def test_records_exception_types(self):
        @mark_as_handler(KeyError, ValueError)
        async def handler(ctx, error):
            pass

        assert handler.__error_handler_for__ == (KeyError, ValueError)
        assert is_handler(handler)

    def test_untagged_is_not_a_handler(self):
        async def handler(ctx, error):
            pass

        assert not is_handler(handler)


class TestErrorHandler:
    """Tests for ErrorHandlerCog."""

    def test_registers_handlers(self, handler):
        assert handler.handlers[errors.CapabilityError] == handler.on_missing_capabilities
        assert handler.handlers[errors.TransportError] == handler.on_transport_error
        assert handler.handlers[Exception] == handler.on_unhandled_exception

    @pytest.mark.asyncio
    async def test_missing_capabilities_are_reported(self, handler, ctx):
        error = invoke_error(errors.CapabilityError({Capability.ADD_MARKER, Capability.RENDER_RICH_CONTENT}))

        await handler.on_command_error(ctx, error)

        message = ctx.send.await_args.args[0]
        assert message.startswith("Cannot paginate without required permissions")
        assert "add reactions" in message
        assert "embed links" in message

    @pytest.mark.asyncio
    async def test_configuration_errors_are_reported(self, handler, ctx):
        await handler.on_command_error(ctx, invoke_error(errors.ConfigurationError("Page 9 does not exist.")))

        ctx.send.assert_awaited_once_with("Page 9 does not exist.")

    @pytest.mark.asyncio
    async def test_transport_errors_get_a_reference(self, handler, ctx):
        await handler.on_command_error(ctx, invoke_error(errors.TransportError("edit failed")))

        assert "Ref:" in ctx.send.await_args.args[0]

    @pytest.mark.asyncio
    async def test_unknown_command(self, handler, ctx):
        await handler.on_command_error(ctx, commands.CommandNotFound())

        ctx.message.add_reaction.assert_awaited_once()
        ctx.send.assert_not_awaited()

    def test_most_specific_handler_wins(self, handler):
        assert handler.handler_for(errors.NotFound()) == handler.on_user_facing_error
        assert handler.handler_for(KeyError("x")) == handler.on_unhandled_exception
