"""In-memory analytics for the recipe pipeline.

Keeps a bounded ring buffer of the most recent pipeline events and derives
an aggregate summary from it. Nothing is persisted: state resets when the
process restarts.

The tracker is passed to the pipeline explicitly so tests can use isolated
instances; `tracker` below is the process-wide instance used by app wiring.
"""

import uuid
from collections import Counter, deque
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from src.models.models import AnalyticsEvent, AnalyticsSummary, EventKind
from src.utils.config import config
from src.utils.logger import logger


def _new_session_id() -> str:
    millis = int(datetime.now(timezone.utc).timestamp() * 1000)
    return f"session-{millis}-{uuid.uuid4().hex[:9]}"


def _rate(count: int, total: int) -> str:
    """Percentage with 2 decimals, or "0%" when there is nothing to divide by."""
    if total <= 0:
        return "0%"
    return f"{count / total * 100:.2f}%"


class EventTracker:
    """Bounded recent-event store with aggregate queries.

    Args:
        capacity: Maximum events retained; the oldest are evicted first.
        window: Age limit for events counted by `summarize()`.
    """

    def __init__(self, capacity: int = 1000, window: timedelta = timedelta(hours=24)) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got: {capacity}")
        self.capacity = capacity
        self.window = window
        self._events: deque[AnalyticsEvent] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._events)

    @property
    def events(self) -> list[AnalyticsEvent]:
        """Snapshot of the retained events, oldest first."""
        return list(self._events)

    def record(self, kind: EventKind, details: Optional[dict[str, Any]] = None) -> AnalyticsEvent:
        """Append an event stamped with the current UTC time and a fresh session id."""
        event = AnalyticsEvent(
            timestamp=datetime.now(timezone.utc),
            event=kind,
            details=details or {},
            session_id=_new_session_id(),
        )
        self._events.append(event)
        logger.info(
            f"Analytics: {kind.value} {event.details}",
            extra={"event": kind.value, "session_id": event.session_id},
        )
        return event

    def reset(self) -> None:
        self._events.clear()

    def summarize(self, now: Optional[datetime] = None) -> AnalyticsSummary:
        """Tally events inside the window and derive success/fallback rates.

        Args:
            now: Reference time for the window. Defaults to the current UTC time.
        """
        now = now or datetime.now(timezone.utc)
        recent = [event for event in self._events if now - event.timestamp < self.window]
        counts = Counter(event.event.value for event in recent)

        total_requests = counts[EventKind.REQUEST_STARTED.value]
        model_successes = counts[EventKind.MODEL_CALL_SUCCESS.value]
        fallback_used = counts[EventKind.FALLBACK_USED.value]

        return AnalyticsSummary(
            total_requests=total_requests,
            model_successes=model_successes,
            model_failures=counts[EventKind.MODEL_CALL_FAILURE.value],
            parse_failures=counts[EventKind.PARSE_FAILURE.value],
            validation_failures=counts[EventKind.VALIDATION_FAILURE.value],
            fallback_used=fallback_used,
            errors=counts[EventKind.ERROR.value],
            model_success_rate=_rate(model_successes, total_requests),
            fallback_rate=_rate(fallback_used, total_requests),
            last_24_hour_events=dict(counts),
            all_time_events=len(self._events),
        )


# Create module-level tracker instance
tracker = EventTracker(
    capacity=config.ANALYTICS_CAPACITY,
    window=timedelta(hours=config.ANALYTICS_WINDOW_HOURS),
)
