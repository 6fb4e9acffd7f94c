from net_timing.analysis.connection_reuse import estimate_if_connection_was_reused
from tests.fixtures.record_factory import make_record


def test_distinct_connection_ids_trust_explicit_flag():
    records = [
        make_record("1", connection_id=1, connection_reused=True, start_time=0),
        make_record("2", connection_id=2, connection_reused=False, start_time=5),
        make_record("3", connection_id=2, connection_reused=None, start_time=6),
    ]
    assert estimate_if_connection_was_reused(records) == {"1": True, "2": False, "3": False}


def test_single_record_trusts_explicit_flag():
    records = [make_record("1", connection_id=0, connection_reused=True)]
    assert estimate_if_connection_was_reused(records) == {"1": True}


def test_shared_connection_id_uses_timing_heuristic():
    records = [
        make_record("1", connection_id=0, connection_reused=True, start_time=0, end_time=1),
        make_record("2", connection_id=0, start_time=0.5, end_time=0.6),
        make_record("3", connection_id=0, start_time=2, end_time=3),
    ]
    result = estimate_if_connection_was_reused(records)
    # earliest reuse possible is 0.6, the end of request 2
    assert result == {"1": False, "2": False, "3": True}


def test_earliest_request_is_never_reused():
    records = [
        make_record("late", connection_id=0, connection_reused=True, start_time=5, end_time=6),
        make_record("first", connection_id=0, connection_reused=True, start_time=0, end_time=1),
    ]
    result = estimate_if_connection_was_reused(records)
    assert result["first"] is False
    assert result["late"] is True


def test_h2_request_after_first_is_reused():
    records = [
        make_record("1", connection_id=0, protocol="h2", start_time=0, end_time=1),
        make_record("2", connection_id=0, protocol="h2", start_time=0.1, end_time=2),
    ]
    assert estimate_if_connection_was_reused(records) == {"1": False, "2": True}


def test_start_time_tie_keeps_first_in_input_order():
    records = [
        make_record("1", connection_id=0, protocol="h2", start_time=0),
        make_record("2", connection_id=0, protocol="h2", start_time=0),
    ]
    assert estimate_if_connection_was_reused(records) == {"1": False, "2": True}


def test_heuristic_runs_per_origin():
    records = [
        make_record("1", "https://a.example/", connection_id=0, start_time=0, end_time=1),
        make_record("2", "https://b.example/", connection_id=0, start_time=3, end_time=4),
        make_record("3", "https://b.example/", connection_id=0, start_time=5, end_time=6),
    ]
    assert estimate_if_connection_was_reused(records) == {"1": False, "2": False, "3": True}


def test_h3_request_is_not_treated_as_multiplexed():
    records = [
        make_record("1", connection_id=0, protocol="h3", start_time=0, end_time=1),
        make_record("2", connection_id=0, protocol="h3", start_time=0.1, end_time=2),
    ]
    assert estimate_if_connection_was_reused(records) == {"1": False, "2": False}
