"""
gettext helpers shared by the bot.

``_`` is installed into builtins on import, so any module importing this one
(directly or through :mod:`kairos.bot.core`) can mark strings for translation.
The active locale lives in a :class:`contextvars.ContextVar` and is set once per
interaction.
"""
import builtins
import contextvars
import os
from glob import glob
from typing import Optional, Union

import discord
from babel.support import Translations, NullTranslations

from kairos.config.settings import BotConfig

BASE_DIR = os.getcwd()
default_locale = "en_US"
locales_dir = "locales"

locales = frozenset(
    map(
        os.path.basename,
        filter(os.path.isdir, glob(os.path.join(BASE_DIR, locales_dir, "*"))),
    )
)

gettext_translations = {
    locale: Translations.load(
        locales=[locale], dirname=os.path.join(BASE_DIR, locales_dir)
    )
    for locale in locales
    if not locale.startswith("_")
}

# source strings are already en_US
gettext_translations["en_US"] = NullTranslations()
LOCALES = frozenset(gettext_translations.keys())


def use_current_gettext(*args, **kwargs):
    locale = current_locale.get()
    return gettext_translations.get(
        locale, gettext_translations[default_locale]
    ).gettext(*args, **kwargs)


def translate(message: str, locale: str) -> Optional[str]:
    """Translate ``message`` for an explicit locale.

    Returns ``None`` when the locale has no catalog or the catalog has no entry
    for the message.
    """
    translations = gettext_translations.get(locale)
    if not isinstance(translations, Translations):
        return None
    translated = translations.gettext(message)
    return translated if translated != message else None


def from_discord_locale(locale: Union[discord.Locale, str, None]) -> str:
    """Map a Discord locale (``sr``, ``en-US``) onto one of :data:`LOCALES`."""
    if locale is None:
        return default_locale
    name = str(locale).replace("-", "_")
    if name in LOCALES:
        return name
    language = name.split("_")[0]
    for candidate in sorted(LOCALES):
        if candidate.split("_")[0] == language:
            return candidate
    return default_locale


def interaction_locale(interaction: discord.Interaction) -> str:
    """Locale to answer an interaction in: the configured one, or the user's."""
    if BotConfig.locale in LOCALES:
        return BotConfig.locale
    return from_discord_locale(interaction.locale)


current_locale = contextvars.ContextVar("i18n")
builtins._ = use_current_gettext

# noinspection PyArgumentList
current_locale.set(default_locale)
