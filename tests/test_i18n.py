"""Tests for locale helpers."""

import discord

from kairos.bot.utils import i18n


def test_default_locale_is_available():
    assert "en_US" in i18n.LOCALES


def test_exact_discord_locale():
    assert i18n.from_discord_locale(discord.Locale.american_english) == "en_US"
    assert i18n.from_discord_locale("en-US") == "en_US"


def test_language_fallback(monkeypatch):
    monkeypatch.setattr(i18n, "LOCALES", frozenset({"en_US", "sr_RS"}))

    assert i18n.from_discord_locale("sr") == "sr_RS"


def test_unknown_locale_falls_back_to_default():
    assert i18n.from_discord_locale("xx") == i18n.default_locale
    assert i18n.from_discord_locale(None) == i18n.default_locale


def test_source_locale_has_no_translation():
    assert i18n.translate("Reminder", "en_US") is None
    assert i18n.translate("Reminder", "xx_XX") is None


def test_gettext_builtin_returns_source_for_default_locale():
    assert _("You have no reminders.") == "You have no reminders."


def test_configured_locale_wins(monkeypatch, make_interaction):
    monkeypatch.setattr(i18n, "LOCALES", frozenset({"en_US", "sr_RS"}))
    monkeypatch.setattr(i18n.BotConfig, "locale", "sr_RS")

    assert i18n.interaction_locale(make_interaction()) == "sr_RS"


def test_unavailable_configured_locale_is_ignored(monkeypatch, make_interaction):
    monkeypatch.setattr(i18n.BotConfig, "locale", "xx_XX")

    assert i18n.interaction_locale(make_interaction()) == "en_US"
