"""
Bot entrypoint & event wiring.

what?:
  - Configures intents & Client, registers the /moderate command group.
  - Listens for messages; runs the local word filter; if a message hits the
    blacklist → replies with a short heads-up showing the masked text and its
    sentiment, then removes the notice after NOTICE_SECONDS.

why?:
  - Keeps Discord plumbing isolated from filtering & scoring so those parts
    can evolve without touching the event loop.
"""

import asyncio, logging, time, discord
from typing import Dict
from discord import app_commands
from discord.ext import commands
from .config import SETTINGS
from .moderate import TextModerate
from .commands import ModerateCommands, COLOR_ALERT, masked_text, sentiment_line

logger = logging.getLogger(__name__)

intents = discord.Intents.default()
intents.message_content = True
intents.guilds = True
bot = commands.Bot(command_prefix="!", intents=intents)

moderator = TextModerate(**SETTINGS.moderator_kwargs())

RATE_LIMIT_SECONDS = 1.5
_last_scored: Dict[int, float] = {}


def should_score(author_id: int, now: float) -> bool:
    """Per-author rate limit so bursts of messages aren't all re-checked."""
    if now - _last_scored.get(author_id, 0) < RATE_LIMIT_SECONDS:
        return False
    _last_scored[author_id] = now
    return True


def heads_up_embed(tm: TextModerate, content: str) -> discord.Embed:
    e = discord.Embed(
        title="Heads-up: watch the language",
        description=masked_text(tm, content)[:4000],
        color=COLOR_ALERT,
    )
    e.add_field(name="Tone", value=sentiment_line(tm.analyze_sentiment(content)), inline=True)
    return e


async def _delete_later(msg: discord.Message, seconds: int = 20):
    await asyncio.sleep(seconds)
    try:
        await msg.delete()
    except discord.HTTPException as e:
        logger.debug("notice %s already gone: %s", msg.id, e)


@bot.event
async def on_ready():
    logger.info("Logged in as %s (guilds=%d)", bot.user, len(bot.guilds))
    try:
        bot.tree.add_command(ModerateCommands(moderator, SETTINGS.perspective_api_key))
    except app_commands.CommandAlreadyRegistered:
        return
    try:
        await bot.tree.sync()
    except discord.HTTPException as e:
        logger.warning("Command sync error: %s", e)


@bot.event
async def on_message(message: discord.Message):
    if message.author.bot or not message.guild:
        return
    content = message.content or ""
    if content.strip() and should_score(message.author.id, time.time()) and moderator.is_profane(content):
        notice = await message.reply(embed=heads_up_embed(moderator, content), mention_author=False, silent=True)
        asyncio.create_task(_delete_later(notice, SETTINGS.notice_seconds))

    await bot.process_commands(message)


def main():
    if not SETTINGS.token:
        raise SystemExit("Set DISCORD_TOKEN in .env")
    bot.run(SETTINGS.token)


if __name__ == "__main__":
    main()
