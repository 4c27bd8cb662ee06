"""Tests for the discord.py backed transport."""

import asyncio
from types import SimpleNamespace
from unittest import mock

import discord
import pytest

from mika.errors import TransportError
from mika.pagination.discord_transport import DiscordTransport
from mika.pagination.transport import REQUIRED_CAPABILITIES
from mika.pagination.transport import Capability
from mika.pagination.transport import Content
from mika.pagination.transport import Event
from mika.pagination.transport import Identity
from mika.pagination.transport import TimedOut


def http_exception(status=403, reason="Forbidden"):
    return discord.HTTPException(SimpleNamespace(status=status, reason=reason), "Missing Permissions")


@pytest.fixture
def bot():
    bot = mock.MagicMock()
    bot.wait_for = mock.AsyncMock()
    return bot


@pytest.fixture
def transport(bot):
    return DiscordTransport(bot)


class TestMessages:
    """Tests for sending and changing messages."""

    def test_payloads_are_embeds(self, transport):
        assert transport.payload_type is discord.Embed

    @pytest.mark.asyncio
    async def test_publish(self, transport):
        channel = mock.MagicMock()
        channel.send = mock.AsyncMock(return_value="message")
        embed = discord.Embed(title="hi")

        result = await transport.publish(channel, Content(text="Page 1 of 2", payload=embed))

        assert result == "message"
        channel.send.assert_awaited_once_with(content="Page 1 of 2", embed=embed)

    @pytest.mark.asyncio
    async def test_edit(self, transport):
        message = mock.MagicMock()
        message.edit = mock.AsyncMock()

        await transport.edit(message, Content(text=None, payload="embed"))

        message.edit.assert_awaited_once_with(content=None, embed="embed")

    @pytest.mark.asyncio
    async def test_markers(self, transport):
        message = mock.MagicMock()
        message.add_reaction = mock.AsyncMock()
        message.clear_reactions = mock.AsyncMock()

        await transport.add_marker(message, "\N{WASTEBASKET}")
        await transport.clear_markers(message)

        message.add_reaction.assert_awaited_once_with("\N{WASTEBASKET}")
        message.clear_reactions.assert_awaited_once_with()

    @pytest.mark.asyncio
    async def test_retract_removes_the_users_reaction(self, transport):
        message = mock.MagicMock()
        message.remove_reaction = mock.AsyncMock()
        user = object()

        await transport.retract(message, Event(symbol="x", identity=Identity(1), handle=user))

        message.remove_reaction.assert_awaited_once_with("x", user)

    @pytest.mark.asyncio
    async def test_http_errors_become_transport_errors(self, transport):
        message = mock.MagicMock()
        cause = http_exception()
        message.delete = mock.AsyncMock(side_effect=cause)

        with pytest.raises(TransportError) as ex_info:
            await transport.delete(message)

        assert ex_info.value.__cause__ is cause
        assert "delete" in str(ex_info.value)


class TestWaiting:
    """Tests for waiting on reactions and replies."""

    @pytest.mark.asyncio
    async def test_reaction_timeout(self, bot, transport):
        bot.wait_for.side_effect = asyncio.TimeoutError

        result = await transport.await_event(SimpleNamespace(id=5), lambda event: True, 30)

        assert result is TimedOut
        assert bot.wait_for.await_args.kwargs["timeout"] == 30

    @pytest.mark.asyncio
    async def test_reaction(self, bot, transport):
        user = SimpleNamespace(id=1, bot=False)
        ours = SimpleNamespace(message=SimpleNamespace(id=5), emoji="\N{BLACK RIGHT-POINTING TRIANGLE}")
        elsewhere = SimpleNamespace(message=SimpleNamespace(id=6), emoji="\N{BLACK RIGHT-POINTING TRIANGLE}")

        async def wait_for(event, *, check, timeout):
            assert event == "reaction_add"
            assert not check(elsewhere, user)
            assert check(ours, user)
            return ours, user

        bot.wait_for.side_effect = wait_for

        result = await transport.await_event(SimpleNamespace(id=5), lambda event: event.identity.id == 1, 30)

        assert result == Event(symbol="\N{BLACK RIGHT-POINTING TRIANGLE}", identity=Identity(1, False), handle=user)

    @pytest.mark.asyncio
    async def test_reaction_predicate_sees_bots(self, bot, transport):
        seen = []
        robot = SimpleNamespace(id=9, bot=True)
        reaction = SimpleNamespace(message=SimpleNamespace(id=5), emoji="x")

        async def wait_for(event, *, check, timeout):
            check(reaction, robot)
            raise asyncio.TimeoutError

        bot.wait_for.side_effect = wait_for

        await transport.await_event(SimpleNamespace(id=5), lambda event: seen.append(event.identity) or False, 30)

        assert seen == [Identity(9, True)]

    @pytest.mark.asyncio
    async def test_reply(self, bot, transport):
        author = SimpleNamespace(id=1, bot=False)
        ours = SimpleNamespace(channel=SimpleNamespace(id=7), content="4", author=author)
        elsewhere = SimpleNamespace(channel=SimpleNamespace(id=8), content="4", author=author)

        async def wait_for(event, *, check, timeout):
            assert event == "message"
            assert not check(elsewhere)
            assert check(ours)
            return ours

        bot.wait_for.side_effect = wait_for

        result = await transport.await_reply(SimpleNamespace(id=7), lambda reply: reply.content == "4", 30)

        assert result.content == "4"
        assert result.identity == Identity(1, False)
        assert result.surface is ours

    @pytest.mark.asyncio
    async def test_reply_timeout(self, bot, transport):
        bot.wait_for.side_effect = asyncio.TimeoutError

        assert await transport.await_reply(SimpleNamespace(id=7), lambda reply: True, 30) is TimedOut


class TestCapabilities:
    """Tests for mapping Discord permissions to capabilities."""

    @pytest.mark.asyncio
    async def test_everything_granted(self, transport):
        channel = mock.MagicMock()
        channel.permissions_for.return_value = discord.Permissions(
            add_reactions=True, manage_messages=True, embed_links=True
        )

        assert await transport.capabilities_of(channel) == REQUIRED_CAPABILITIES
        channel.permissions_for.assert_called_once_with(channel.guild.me)

    @pytest.mark.asyncio
    async def test_partial(self, transport):
        channel = mock.MagicMock()
        channel.permissions_for.return_value = discord.Permissions(add_reactions=True, embed_links=True)

        granted = await transport.capabilities_of(channel)

        assert granted == {Capability.ADD_MARKER, Capability.RENDER_RICH_CONTENT}

    @pytest.mark.asyncio
    async def test_private_channel_uses_bot_user(self, bot, transport):
        channel = mock.MagicMock()
        channel.guild = None
        channel.permissions_for.return_value = discord.Permissions.none()

        assert await transport.capabilities_of(channel) == frozenset()
        channel.permissions_for.assert_called_once_with(bot.user)
