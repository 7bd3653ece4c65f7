from study_dashboard.services.datastore.base import StoredStatus, StudyStatusStore

T = "2026-10-19T09:50:00+00:00"

DEFAULT_STATS = {"avg_wait_time": 45, "total_processed": 128, "success_rate": 98.5}


class FakeStore(StudyStatusStore):
    """In-memory stand-in for the database: token -> events, oldest first."""

    def __init__(self, events=None, stats=DEFAULT_STATS, fail: Exception | None = None):
        self.events = events or {}
        self.stats = stats
        self.fail = fail
        self.calls = []

    def latest_status(self, token):
        self.calls.append(("latest_status", token))
        if self.fail:
            raise self.fail
        rows = self.events.get(token)
        return rows[-1] if rows else None

    def status_history(self, token):
        self.calls.append(("status_history", token))
        if self.fail:
            raise self.fail
        return list(self.events.get(token, []))

    def statistics(self, hours_ago):
        self.calls.append(("statistics", hours_ago))
        if self.fail:
            raise self.fail
        return self.stats


def sample_store() -> FakeStore:
    return FakeStore(
        events={
            "STUDY001": [StoredStatus("results_received", T)],
            "STUDY002": [
                StoredStatus("send_complete", "2026-10-19T09:00:00+00:00"),
                StoredStatus("received_central", "2026-10-19T09:10:00+00:00"),
                StoredStatus("ai_processing", "2026-10-19T09:45:00+00:00"),
            ],
            "STUDY003": [StoredStatus("send_complete", T)],
            "BROKEN": [StoredStatus("archived", T)],
        }
    )
