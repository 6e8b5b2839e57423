"""Tests for the Discord surface: embeds, slash-command callbacks and on_message."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from textmoderate import TextModerate, TransportError
from textmoderate import bot as botmod
from textmoderate.commands import COLOR_ALERT, COLOR_OK, HIDDEN_TEXT, ModerateCommands, check_embed, masked_text, sentiment_line


def _interaction(can_edit: bool = True):
    inter = MagicMock()
    inter.user.guild_permissions.manage_messages = can_edit
    inter.response.send_message = AsyncMock()
    inter.response.defer = AsyncMock()
    inter.followup.send = AsyncMock()
    return inter


class TestEmbeds:
    def test_sentiment_line(self, moderator):
        assert sentiment_line(moderator.analyze_sentiment("good")) == "positive (+2, +2.00 per word)"
        assert sentiment_line(moderator.analyze_sentiment("table")) == "neutral (+0, +0.00 per word)"

    def test_check_embed_flagged(self, moderator):
        e = check_embed(moderator, "you badword")
        assert e.title == "Flagged"
        assert e.color.value == COLOR_ALERT
        assert e.fields[0].value == "you *******"

    def test_check_embed_clean(self, moderator):
        e = check_embed(moderator, "not good")
        assert e.title == "Looks clean"
        assert e.color.value == COLOR_OK
        assert e.fields[0].value == "not good"
        assert e.fields[2].value == "good -2"

    def test_check_embed_hides_phrase_entries(self):
        tm = TextModerate(empty_list=True, words=["blow job", "a$$"])
        e = check_embed(tm, "what a blow job")
        assert e.title == "Flagged"
        assert e.fields[0].value == HIDDEN_TEXT
        assert "a$$" not in check_embed(tm, "nice a$$").fields[0].value

    def test_masked_text(self):
        tm = TextModerate(empty_list=True, words=["badword", "a$$"])
        assert masked_text(tm, "all good") == "all good"
        assert masked_text(tm, "you badword") == "you *******"
        assert masked_text(tm, "badword a$$") == HIDDEN_TEXT


class TestCommands:
    @pytest.mark.asyncio
    async def test_add_requires_permission(self, moderator):
        group = ModerateCommands(moderator)
        inter = _interaction(can_edit=False)
        await ModerateCommands.add.callback(group, inter, "darn")
        assert not moderator.is_profane("darn")
        inter.response.send_message.assert_awaited_once_with("Need Manage Messages.", ephemeral=True)

    @pytest.mark.asyncio
    async def test_add_and_remove(self, moderator):
        group = ModerateCommands(moderator)
        await ModerateCommands.add.callback(group, _interaction(), "darn")
        assert moderator.is_profane("darn")
        await ModerateCommands.remove.callback(group, _interaction(), "darn")
        assert not moderator.is_profane("darn")

    @pytest.mark.asyncio
    async def test_check(self, moderator):
        group = ModerateCommands(moderator)
        inter = _interaction()
        await ModerateCommands.check.callback(group, inter, "badword")
        kwargs = inter.response.send_message.await_args.kwargs
        assert kwargs["ephemeral"] is True
        assert kwargs["embed"].title == "Flagged"

    @pytest.mark.asyncio
    async def test_toxicity_without_key(self, moderator):
        group = ModerateCommands(moderator, api_key="")
        inter = _interaction()
        await ModerateCommands.toxicity.callback(group, inter, "hi")
        inter.response.send_message.assert_awaited_once_with("Toxicity scoring is not configured.", ephemeral=True)

    @pytest.mark.asyncio
    async def test_toxicity_transport_error(self):
        tm = MagicMock()
        tm.analyze_toxicity = AsyncMock(side_effect=TransportError("HTTP 403", status_code=403))
        group = ModerateCommands(tm, api_key="key")
        inter = _interaction()
        await ModerateCommands.toxicity.callback(group, inter, "hi")
        msg = inter.followup.send.await_args.args[0]
        assert "unavailable" in msg

    @pytest.mark.asyncio
    async def test_toxicity_score(self):
        tm = MagicMock()
        tm.analyze_toxicity = AsyncMock(return_value={"attributeScores": {"TOXICITY": {"summaryScore": {"value": 0.91}}}})
        group = ModerateCommands(tm, api_key="key")
        inter = _interaction()
        await ModerateCommands.toxicity.callback(group, inter, "hi")
        embed = inter.followup.send.await_args.kwargs["embed"]
        assert embed.fields[0].value == "0.91"


class TestOnMessage:
    @pytest.fixture(autouse=True)
    def _reset(self, monkeypatch):
        botmod._last_scored.clear()
        monkeypatch.setattr(botmod, "moderator", TextModerate(empty_list=True, words=["badword"]))
        monkeypatch.setattr(botmod.SETTINGS, "notice_seconds", 0)
        monkeypatch.setattr(botmod.bot, "process_commands", AsyncMock())

    def _message(self, content: str):
        msg = MagicMock()
        msg.author.bot = False
        msg.author.id = 42
        msg.content = content
        notice = MagicMock()
        notice.delete = AsyncMock()
        msg.reply = AsyncMock(return_value=notice)
        return msg, notice

    def test_rate_limit(self):
        assert botmod.should_score(1, 100.0)
        assert not botmod.should_score(1, 100.5)
        assert botmod.should_score(2, 100.5)
        assert botmod.should_score(1, 102.0)

    def test_heads_up_embed(self):
        e = botmod.heads_up_embed(botmod.moderator, "badword, good")
        assert e.description == "*******, good"
        assert e.fields[0].value.startswith("positive")

    def test_heads_up_embed_hides_phrase_entries(self):
        tm = TextModerate(empty_list=True, words=["a$$", "blow job"])
        assert botmod.heads_up_embed(tm, "nice a$$").description == HIDDEN_TEXT
        assert "blow job" not in botmod.heads_up_embed(tm, "what a blow job").description

    @pytest.mark.asyncio
    async def test_flagged_message_gets_notice(self):
        msg, notice = self._message("you badword")
        await botmod.on_message(msg)
        msg.reply.assert_awaited_once()
        assert msg.reply.await_args.kwargs["embed"].description == "you *******"
        for _ in range(3):
            await asyncio.sleep(0)
        notice.delete.assert_awaited_once()
        botmod.bot.process_commands.assert_awaited_once_with(msg)

    @pytest.mark.asyncio
    async def test_clean_message_is_left_alone(self):
        msg, _ = self._message("hello there")
        await botmod.on_message(msg)
        msg.reply.assert_not_awaited()
        botmod.bot.process_commands.assert_awaited_once_with(msg)

    @pytest.mark.asyncio
    async def test_bots_are_ignored(self):
        msg, _ = self._message("badword")
        msg.author.bot = True
        await botmod.on_message(msg)
        msg.reply.assert_not_awaited()
        botmod.bot.process_commands.assert_not_awaited()
