from types import SimpleNamespace

import pytest

from study_dashboard.constants.stages import STAGE_ORDER, Stage
from study_dashboard.timeline import UnknownStatus, derive_timeline

T = "2026-10-19T09:50:00+00:00"


def test_one_entry_per_stage_in_fixed_order():
    timeline = derive_timeline(Stage.SENT_TO_AI, T)
    assert [e.status for e in timeline] == list(STAGE_ORDER)
    assert [e.label for e in timeline] == [
        "Send Complete",
        "Received at Central Server",
        "Sent to AI",
        "AI Processing",
        "Results Received",
    ]


@pytest.mark.parametrize("current", list(Stage))
@pytest.mark.parametrize("ts", [T, "1970-01-01T00:00:00Z"])
def test_completed_exactly_up_to_current(current, ts):
    timeline = derive_timeline(current, ts)
    idx = STAGE_ORDER.index(current)
    assert [e.completed for e in timeline] == [i <= idx for i in range(len(STAGE_ORDER))]


def test_results_received_marks_everything_completed():
    timeline = derive_timeline("results_received", T)

    assert all(e.completed for e in timeline)
    assert timeline[-1].timestamp == T
    assert [e.timestamp for e in timeline[:-1]] == ["", "", "", ""]


def test_send_complete_only_first_stage_done():
    timeline = derive_timeline("send_complete", T)

    assert timeline[0].completed and timeline[0].timestamp == T
    for entry in timeline[1:]:
        assert entry.completed is False
        assert entry.timestamp == ""


def test_derivation_is_idempotent():
    assert derive_timeline("ai_processing", T) == derive_timeline("ai_processing", T)


@pytest.mark.parametrize("bad", ["archived", "", "SEND_COMPLETE", None])
def test_unknown_status_fails_fast(bad):
    with pytest.raises(UnknownStatus):
        derive_timeline(bad, T)


def test_history_fills_completed_stage_timestamps():
    history = [
        SimpleNamespace(status="send_complete", timestamp="t0"),
        SimpleNamespace(status="received_central", timestamp="t1"),
        SimpleNamespace(status="received_central", timestamp="t1-retry"),
        SimpleNamespace(status="ai_processing", timestamp="t3"),
    ]

    timeline = derive_timeline("ai_processing", T, history=history)

    assert [e.timestamp for e in timeline] == ["t0", "t1-retry", "", T, ""]
    assert [e.completed for e in timeline] == [True, True, True, True, False]


def test_history_never_stamps_pending_stages():
    history = [SimpleNamespace(status="results_received", timestamp="later")]

    timeline = derive_timeline("send_complete", T, history=history)

    assert timeline[-1].timestamp == ""
    assert timeline[-1].completed is False


def test_history_with_unknown_status_fails():
    with pytest.raises(UnknownStatus):
        derive_timeline("sent_to_ai", T, history=[SimpleNamespace(status="bogus", timestamp="x")])
