import discord

from .misc import split_text

MESSAGE_LIMIT = 2000


def allowed_mentions(*, mention_users: bool = True) -> discord.AllowedMentions:
    return discord.AllowedMentions(
        everyone=False, users=mention_users, roles=False, replied_user=False
    )


async def safe_reply(
    interaction: discord.Interaction, content: str, *, mention_users: bool = True
):
    """Reply with ``content``, splitting it over several messages if it is too long.

    The first part answers the interaction (editing the deferred response if
    there is one), the rest is sent as follow-ups.
    """
    mentions = allowed_mentions(mention_users=mention_users)
    first, *rest = list(split_text(content, MESSAGE_LIMIT)) or [content]

    if interaction.response.is_done():
        await interaction.edit_original_response(
            content=first, allowed_mentions=mentions
        )
    else:
        await interaction.response.send_message(first, allowed_mentions=mentions)

    for part in rest:
        await interaction.followup.send(part, allowed_mentions=mentions)
