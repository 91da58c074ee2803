from .base import CreatedAtMixin
from .reminder import Reminder
