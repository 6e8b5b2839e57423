"""
Slash-command layer (presentation only).

what?:
  - /moderate check     → profanity flag, masked text, sentiment (ephemeral)
  - /moderate add       → blacklist a word (needs Manage Messages)
  - /moderate remove    → whitelist a word (needs Manage Messages)
  - /moderate toxicity  → remote toxicity score, only when a Perspective key is set
"""

import logging, discord
from discord import app_commands
from .errors import TransportError
from .moderate import TextModerate
from .sentiment import AnalysisResult
from .toxicity import summary_score

logger = logging.getLogger(__name__)

COLOR_OK = 0x10B981
COLOR_INFO = 0x3B82F6
COLOR_WARN = 0xF59E0B
COLOR_ALERT = 0xEF4444


def sentiment_line(res: AnalysisResult) -> str:
    mood = "positive" if res.score > 0 else "negative" if res.score < 0 else "neutral"
    return f"{mood} ({res.score:+d}, {res.comparative:+.2f} per word)"


HIDDEN_TEXT = "(hidden: contains a blacklisted phrase)"


def masked_text(tm: TextModerate, text: str) -> str:
    """Text safe to echo back. Phrase entries survive clean(), so those messages are withheld."""
    if not tm.is_profane(text):
        return text
    cleaned = tm.clean(text)
    return HIDDEN_TEXT if tm.is_profane(cleaned) else cleaned


def check_embed(tm: TextModerate, text: str) -> discord.Embed:
    profane = tm.is_profane(text)
    res = tm.analyze_sentiment(text)
    e = discord.Embed(title="Flagged" if profane else "Looks clean", color=COLOR_ALERT if profane else COLOR_OK)
    e.add_field(name="Text", value=masked_text(tm, text)[:1024] or "(empty)", inline=False)
    e.add_field(name="Sentiment", value=sentiment_line(res), inline=True)
    if res.words:
        e.add_field(name="Scored words", value=", ".join(f"{k} {v:+d}" for c in res.calculation for k, v in c.items())[:1024], inline=False)
    return e


def _can_edit(inter: discord.Interaction) -> bool:
    perms = getattr(inter.user, "guild_permissions", None)
    return bool(perms and perms.manage_messages)


class ModerateCommands(app_commands.Group):
    def __init__(self, moderator: TextModerate, api_key: str = ""):
        super().__init__(name="moderate", description="Word filter & sentiment commands")
        self.moderator = moderator
        self.api_key = api_key

    @app_commands.command(name="check", description="Check a text for blacklisted words and sentiment (private)")
    async def check(self, inter: discord.Interaction, text: str):
        await inter.response.send_message(embed=check_embed(self.moderator, text), ephemeral=True)

    @app_commands.command(name="add", description="Add a word to the blacklist")
    async def add(self, inter: discord.Interaction, word: str):
        if not _can_edit(inter):
            await inter.response.send_message("Need Manage Messages.", ephemeral=True)
            return
        self.moderator.add_words(word)
        logger.info("%s blacklisted %r", inter.user, word)
        await inter.response.send_message(f"Blacklisted **{word}** ✓", ephemeral=True)

    @app_commands.command(name="remove", description="Whitelist a word")
    async def remove(self, inter: discord.Interaction, word: str):
        if not _can_edit(inter):
            await inter.response.send_message("Need Manage Messages.", ephemeral=True)
            return
        self.moderator.remove_words(word)
        logger.info("%s whitelisted %r", inter.user, word)
        await inter.response.send_message(f"Whitelisted **{word}** ✓", ephemeral=True)

    @app_commands.command(name="toxicity", description="Score a text with Perspective (private)")
    async def toxicity(self, inter: discord.Interaction, text: str):
        if not self.api_key:
            await inter.response.send_message("Toxicity scoring is not configured.", ephemeral=True)
            return
        await inter.response.defer(ephemeral=True, thinking=True)
        try:
            result = await self.moderator.analyze_toxicity(text, self.api_key)
        except TransportError as err:
            await inter.followup.send(f"Toxicity service unavailable ({err}).", ephemeral=True)
            return
        value = summary_score(result)
        e = discord.Embed(title="Toxicity", color=COLOR_WARN if (value or 0.0) >= 0.5 else COLOR_INFO)
        e.add_field(name="TOXICITY", value=f"{value:.2f}" if value is not None else "n/a")
        await inter.followup.send(embed=e, ephemeral=True)
