import logging

from pymongo import monitoring

from kairos.logs import make_logger


class CommandLogger(monitoring.CommandListener):
    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def started(self, event):
        self.logger.debug(
            f"Command {event.command_name} ({event.request_id}) started "
            f"on {event.connection_id}"
        )

    def succeeded(self, event):
        self.logger.debug(
            f"Command {event.command_name} ({event.request_id}) succeeded "
            f"in {event.duration_micros} microseconds"
        )

    def failed(self, event):
        self.logger.error(
            f"Command {event.command_name} ({event.request_id}) on "
            f"{event.connection_id} failed in {event.duration_micros} "
            f"microseconds: {event.failure}"
        )


class HeartbeatLogger(monitoring.ServerHeartbeatListener):
    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def started(self, event):
        self.logger.debug(f"Heartbeat sent to {event.connection_id}")

    def succeeded(self, event):
        self.logger.debug(f"Heartbeat to {event.connection_id} succeeded")

    def failed(self, event):
        self.logger.error(
            f"Heartbeat to {event.connection_id} failed with error {event.reply}"
        )


_registered = False


def setup_logger():
    global _registered
    logger = make_logger("kairos.mongo", "mongo/mongo.log", backup_count=3)
    if not _registered:
        monitoring.register(CommandLogger(logger))
        monitoring.register(HeartbeatLogger(logger))
        _registered = True
    return logger
