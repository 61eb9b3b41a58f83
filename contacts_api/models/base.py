"""
Base document shared by all collections.
"""

from datetime import datetime, timezone

from beanie import Document, Insert, Replace, Save, before_event
from pydantic import Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimestampedDocument(Document):
    """
    Document carrying ``created_at`` / ``updated_at`` fields that are kept
    current by beanie event hooks.
    """

    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @before_event(Insert)
    def stamp_created(self):
        now = utc_now()
        self.created_at = now
        self.updated_at = now

    @before_event(Replace, Save)
    def stamp_updated(self):
        self.updated_at = utc_now()
