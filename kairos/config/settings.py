from typing import FrozenSet, Optional, Tuple


class BotConfig:
    discord_token: str = None
    owner_id: Optional[int] = None
    locale: Optional[str] = None  # answer every interaction in this locale
    description: str = (
        "Kairos keeps your reminders. Tell it what to remind you of and when, "
        "in plain words."
    )
    core_cogs: FrozenSet[str] = frozenset()
    other_cogs: FrozenSet[str] = frozenset({"Reminder"})
    sync_commands: bool = True

    @property
    def cogs(self):
        return self.core_cogs | self.other_cogs


class MongoConfig:
    host: str = "localhost"
    port: str = "27017"
    username: str = None
    password: str = None
    database: str = "kairos"

    @property
    def url(self):
        url = "mongodb://"
        if self.username and self.password:
            url += f"{self.username}:{self.password}@"
        return url + f"{self.host}:{self.port}/"


class ReminderConfig:
    timezone: str = "Europe/Skopje"  # used for expressions without an explicit zone
    languages: Tuple[str, ...] = ("mk", "sr", "en")


class SentryConfig:
    dsn: str = None
    traces_sample_rate: float = 1.0
