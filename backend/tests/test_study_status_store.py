import threading
from datetime import datetime

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from study_dashboard.core import AppError, ErrorCode
from study_dashboard.db.session import make_engine
from study_dashboard.models import Base, StudyStatusEvent
from study_dashboard.repos.study_status.read import StudyStatusReadRepo
from study_dashboard.services.datastore.base import normalize_aggregate
from study_dashboard.services.datastore.postgres_store import SqlStudyStatusStore
from study_dashboard.services.datastore.supabase_store import SupabaseStudyStatusStore


@pytest.fixture
def db():
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine)()
    session.add_all(
        [
            StudyStatusEvent(study_token="STUDY002", status="send_complete", timestamp=datetime(2026, 10, 19, 9, 0)),
            StudyStatusEvent(study_token="STUDY002", status="ai_processing", timestamp=datetime(2026, 10, 19, 9, 45)),
            StudyStatusEvent(study_token="STUDY002", status="received_central", timestamp=datetime(2026, 10, 19, 9, 10)),
            StudyStatusEvent(study_token="STUDY003", status="send_complete", timestamp=datetime(2026, 10, 19, 8, 0)),
        ]
    )
    session.commit()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


def test_repo_returns_most_recent_event(db):
    latest = StudyStatusReadRepo(db).get_latest("STUDY002")
    assert latest.status == "ai_processing"


def test_repo_history_is_oldest_first(db):
    rows = StudyStatusReadRepo(db).list_history("STUDY002")
    assert [r.status for r in rows] == ["send_complete", "received_central", "ai_processing"]


def test_repo_rejects_unsafe_function_name(db):
    with pytest.raises(ValueError):
        StudyStatusReadRepo(db, statistics_function="stats(); drop table study_status; --")


def test_sql_store_maps_rows(db):
    store = SqlStudyStatusStore(db)

    latest = store.latest_status("STUDY002")
    assert latest.status == "ai_processing"
    assert latest.timestamp.startswith("2026-10-19T09:45:00")
    assert store.latest_status("STUDY999") is None
    assert [h.status for h in store.status_history("STUDY002")][-1] == "ai_processing"


def test_sql_store_wraps_statistics_failure(db):
    # SQLite has no get_study_statistics routine
    with pytest.raises(AppError) as ei:
        SqlStudyStatusStore(db).statistics(24)

    assert ei.value.code == ErrorCode.DB_ERROR
    assert ei.value.status_code == 500


@pytest.mark.parametrize(
    "data, expected",
    [
        (None, None),
        ([], None),
        ({}, None),
        ([{"avg_wait_time": 5}], {"avg_wait_time": 5}),
        ({"avg_wait_time": 5}, {"avg_wait_time": 5}),
    ],
)
def test_normalize_aggregate(data, expected):
    assert normalize_aggregate(data) == expected


class _Result:
    def __init__(self, data):
        self.data = data


class _Query:
    def __init__(self, client, data):
        self.client = client
        self.data = data

    def __getattr__(self, name):
        def step(*args, **kwargs):
            self.client.calls.append((name, args, kwargs))
            return self

        return step

    def execute(self):
        if isinstance(self.data, Exception):
            raise self.data
        return _Result(self.data)


class FakeSupabase:
    def __init__(self, rows=None, stats=None):
        self.rows = rows if rows is not None else []
        self.stats = stats
        self.calls = []

    def table(self, name):
        self.calls.append(("table", (name,), {}))
        return _Query(self, self.rows)

    def rpc(self, fn, params):
        self.calls.append(("rpc", (fn, params), {}))
        return _Query(self, self.stats)


def test_supabase_latest_status_queries_newest_first():
    fake = FakeSupabase(rows=[{"status": "sent_to_ai", "timestamp": "2026-10-19T09:20:00+00:00"}])
    store = SupabaseStudyStatusStore(client=fake)

    latest = store.latest_status("STUDY004")

    assert latest.status == "sent_to_ai"
    assert ("table", ("study_status",), {}) in fake.calls
    assert ("eq", ("study_token", "STUDY004"), {}) in fake.calls
    assert ("order", ("timestamp",), {"desc": True}) in fake.calls
    assert ("limit", (1,), {}) in fake.calls


def test_supabase_no_rows_is_none():
    assert SupabaseStudyStatusStore(client=FakeSupabase()).latest_status("STUDY999") is None


def test_supabase_statistics_calls_rpc_with_window():
    fake = FakeSupabase(stats={"avg_wait_time": 30, "total_processed": 10, "success_rate": 90})

    stats = SupabaseStudyStatusStore(client=fake).statistics(12)

    assert stats == {"avg_wait_time": 30, "total_processed": 10, "success_rate": 90}
    assert ("rpc", ("get_study_statistics", {"hours_ago": 12}), {}) in fake.calls


def test_supabase_query_error_is_db_error():
    store = SupabaseStudyStatusStore(client=FakeSupabase(rows=RuntimeError("JWT expired")))

    with pytest.raises(AppError) as ei:
        store.latest_status("STUDY001")

    assert ei.value.code == ErrorCode.DB_ERROR
    assert ei.value.details == "JWT expired"


def test_supabase_requires_configuration(monkeypatch):
    from study_dashboard.core.config import settings

    monkeypatch.setattr(settings, "SUPABASE_URL", None)

    with pytest.raises(AppError) as ei:
        SupabaseStudyStatusStore().statistics(24)

    assert ei.value.code == ErrorCode.CONFIG_ERROR


def test_sqlite_engine_allows_use_across_threads():
    engine = make_engine("sqlite://")
    result = []

    with engine.connect() as conn:
        worker = threading.Thread(target=lambda: result.append(conn.execute(text("select 1")).scalar()))
        worker.start()
        worker.join()

    assert result == [1]
