"""Model for generated reply cache entry."""

from pydantic import BaseModel


class CacheEntry(BaseModel):
    """Model representing a cache entry.

    Attributes:
        key: Normalized user utterance
        value: Reply generated for the utterance
        created_at: Insertion time as reported by the cache clock
    """

    key: str
    value: str
    created_at: float
