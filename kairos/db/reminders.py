"""Reminder persistence.

Every accessor returns ``None`` when the database call fails, so callers can
tell "nothing stored" (an empty list) apart from "could not load".
"""
import logging
from typing import Iterable, List, Optional

import pymongo
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from .models import Reminder

logger = logging.getLogger("kairos.mongo")

_projection = {"_id": False}


async def ensure_indexes(db):
    await db.reminders.create_index("id", unique=True)
    await db.reminders.create_index(
        [("user_id", pymongo.ASCENDING), ("timestamp", pymongo.ASCENDING)]
    )


async def create_reminder(db, reminder: Reminder) -> Optional[Reminder]:
    try:
        await db.reminders.insert_one(reminder.model_dump())
    except PyMongoError as e:
        logger.error(f"Could not create reminder {reminder.id}: {e}")
        return None

    logger.info(f"Reminder {reminder.id} created for user {reminder.user_id}")
    return reminder


async def _find(db, query: dict) -> Optional[List[Reminder]]:
    try:
        cursor = db.reminders.find(query, _projection).sort(
            [("timestamp", pymongo.ASCENDING)]
        )
        documents = await cursor.to_list(length=None)
        return [Reminder(**document) for document in documents]
    except (PyMongoError, ValidationError) as e:
        logger.error(f"Could not load reminders ({query}): {e}")
        return None


async def get_reminders_by_user_id(db, user_id: int) -> Optional[List[Reminder]]:
    return await _find(db, {"user_id": user_id})


async def get_reminders(db) -> Optional[List[Reminder]]:
    return await _find(db, {})


async def delete_reminders(db, user_id: int, ids: Iterable[int]) -> Optional[int]:
    """Delete the given reminders of ``user_id``. Ids owned by others are skipped."""
    ids = list(ids)
    try:
        result = await db.reminders.delete_many(
            {"user_id": user_id, "id": {"$in": ids}}
        )
    except PyMongoError as e:
        logger.error(f"Could not delete reminders {ids} of user {user_id}: {e}")
        return None

    logger.info(f"Deleted {result.deleted_count} reminder(s) of user {user_id}")
    return result.deleted_count
