"""Unit tests for the in-memory analytics tracker."""

from datetime import timedelta

import pytest

from src.analytics.tracker import EventTracker
from src.models.models import EventKind


class TestRecord:
    """Test event recording and retention."""

    def test_record_stamps_event(self, tracker):
        """Test that recorded events carry kind, details and a session id."""
        event = tracker.record(EventKind.REQUEST_STARTED, {"flow": "recipe_search"})

        assert event.event == EventKind.REQUEST_STARTED
        assert event.details == {"flow": "recipe_search"}
        assert event.session_id.startswith("session-")
        assert event.timestamp.tzinfo is not None
        assert len(tracker) == 1

    def test_record_without_details(self, tracker):
        """Test that details default to an empty dict."""
        assert tracker.record(EventKind.ERROR).details == {}

    def test_oldest_evicted_at_capacity(self):
        """Test that 1500 inserts keep only the most recent 1000."""
        tracker = EventTracker(capacity=1000)
        for i in range(1500):
            tracker.record(EventKind.REQUEST_STARTED, {"i": i})

        events = tracker.events

        assert len(events) == 1000
        assert events[0].details["i"] == 500
        assert events[-1].details["i"] == 1499

    def test_events_snapshot_is_a_copy(self, tracker):
        """Test that mutating the snapshot does not affect the tracker."""
        tracker.record(EventKind.COMPLETED)
        tracker.events.clear()

        assert len(tracker) == 1

    def test_reset(self, tracker):
        """Test that reset drops all events."""
        tracker.record(EventKind.COMPLETED)
        tracker.reset()

        assert len(tracker) == 0

    def test_invalid_capacity(self):
        """Test that a capacity below one is rejected."""
        with pytest.raises(ValueError):
            EventTracker(capacity=0)


class TestSummarize:
    """Test aggregate summaries."""

    def test_empty_summary(self, tracker):
        """Test that an empty tracker reports zero counts and "0%" rates."""
        summary = tracker.summarize()

        assert summary.total_requests == 0
        assert summary.model_success_rate == "0%"
        assert summary.fallback_rate == "0%"
        assert summary.last_24_hour_events == {}
        assert summary.all_time_events == 0

    def test_counts_and_rates(self, tracker):
        """Test per-kind counts and two-decimal percentage rates."""
        for _ in range(6):
            tracker.record(EventKind.REQUEST_STARTED)
        for _ in range(3):
            tracker.record(EventKind.MODEL_CALL_SUCCESS)
        tracker.record(EventKind.MODEL_CALL_FAILURE)
        tracker.record(EventKind.PARSE_FAILURE)
        tracker.record(EventKind.VALIDATION_FAILURE)
        tracker.record(EventKind.FALLBACK_USED)
        tracker.record(EventKind.ERROR)

        summary = tracker.summarize()

        assert summary.total_requests == 6
        assert summary.model_successes == 3
        assert summary.model_failures == 1
        assert summary.parse_failures == 1
        assert summary.validation_failures == 1
        assert summary.fallback_used == 1
        assert summary.errors == 1
        assert summary.model_success_rate == "50.00%"
        assert summary.fallback_rate == "16.67%"
        assert summary.last_24_hour_events["request_started"] == 6
        assert summary.all_time_events == 14

    def test_window_excludes_old_events(self, tracker):
        """Test that events outside the window are not counted but still retained."""
        event = tracker.record(EventKind.REQUEST_STARTED)

        summary = tracker.summarize(now=event.timestamp + timedelta(hours=25))

        assert summary.total_requests == 0
        assert summary.last_24_hour_events == {}
        assert summary.all_time_events == 1

    def test_summary_serializes_with_aliases(self, tracker):
        """Test the camelCase summary payload."""
        tracker.record(EventKind.REQUEST_STARTED)

        dumped = tracker.summarize().model_dump(by_alias=True)

        assert dumped["totalRequests"] == 1
        assert dumped["last24HourEvents"] == {"request_started": 1}
        assert "modelSuccessRate" in dumped
        assert "allTimeEvents" in dumped
