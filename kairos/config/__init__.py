import json
import pathlib

from .settings import BotConfig, MongoConfig, ReminderConfig, SentryConfig

CONFIG_PATH = pathlib.Path(__file__).parent.absolute().joinpath("config.json")


def read_config(path: pathlib.Path = CONFIG_PATH) -> dict:
    with open(path, encoding="utf-8") as json_file:
        return dict(json.load(json_file))


def apply_config(data: dict, debug: bool = False) -> dict:
    if not debug:
        BotConfig.discord_token = data["Bot"]["main_token"]
        if "Mongo" in data:
            MongoConfig.username = data["Mongo"].get("username")
            MongoConfig.password = data["Mongo"].get("password")
    else:
        BotConfig.discord_token = data["Bot"]["test_token"]
    BotConfig.owner_id = data["Bot"].get("owner_id")
    BotConfig.locale = data["Bot"].get("locale")
    for key in ("host", "port", "database"):
        if key in data.get("Mongo", {}):
            setattr(MongoConfig, key, data["Mongo"][key])
    for key, value in data.get("Reminder", {}).items():
        if key == "languages":
            value = tuple(value)
        setattr(ReminderConfig, key, value)
    for key, value in data.get("Sentry", {}).items():
        setattr(SentryConfig, key, value)
    return {
        "bot": BotConfig(),
        "mongo": MongoConfig(),
        "reminder": ReminderConfig(),
        "sentry": SentryConfig(),
    }


async def init_config(app):
    if app["debug"]:
        app["logger"].info("DEBUG MODE")
    app["config"] = apply_config(read_config(), app["debug"])
    app["logger"].info("Config initialized")
