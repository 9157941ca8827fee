"""Usage Quota Service - daily limit on vocabulary requests."""

from datetime import date
from typing import Callable, Optional

from pinata.io import DatabaseManager


class UsageQuotaService:
    """Gatekeeper checked before every remote vocabulary request.

    Counts are persisted per calendar day, so the limit resets at midnight
    local time.
    """

    def __init__(
        self,
        db: DatabaseManager,
        daily_limit: int,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        if daily_limit < 0:
            raise ValueError(f"Daily limit must be non-negative, got {daily_limit}")
        self._db = db
        self.daily_limit = daily_limit
        self._today = today or date.today

    def remaining_attempts(self, day: Optional[date] = None) -> int:
        """Attempts left for ``day`` (defaults to today), never negative."""
        used = self._db.get_usage_count(day or self._today())
        return max(self.daily_limit - used, 0)

    def has_attempts_left(self) -> bool:
        return self.remaining_attempts() > 0

    def consume(self) -> int:
        """Record one attempt for today and return the attempts left.

        Raises:
            RuntimeError: If the daily limit is already reached.
        """
        day = self._today()
        if self.remaining_attempts(day) <= 0:
            raise RuntimeError("Daily vocabulary limit reached")
        used = self._db.increment_usage(day)
        return max(self.daily_limit - used, 0)
