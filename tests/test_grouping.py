from net_timing.analysis.grouping import group_by_origin
from net_timing.core.models import origin_of
from tests.fixtures.record_factory import make_record


def test_group_by_origin_preserves_order():
    records = [
        make_record("1", "https://a.example/x"),
        make_record("2", "http://a.example:8080/"),
        make_record("3", "https://a.example:443/y"),
    ]
    grouped = group_by_origin(records)
    assert list(grouped) == ["https://a.example", "http://a.example:8080"]
    assert [r.request_id for r in grouped["https://a.example"]] == ["1", "3"]


def test_group_by_origin_empty():
    assert group_by_origin([]) == {}


def test_origin_of_normalizes_host_and_default_port():
    assert origin_of("https://Example.COM:443/path?q=1") == "https://example.com"
    assert origin_of("http://example.com:80") == "http://example.com"
    assert origin_of("http://[::1]:8080/") == "http://[::1]:8080"


def test_origin_of_without_host_is_opaque():
    assert origin_of("data:text/plain,hello") == "null"
