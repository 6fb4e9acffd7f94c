import sys
from pathlib import Path

# Ensure the src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
for path in (SRC_PATH, PROJECT_ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


import pytest

from tests.fixtures.record_factory import make_record


@pytest.fixture
def handshake_records():
    """Two origins with TCP (and TLS) connect timing on fresh connections."""
    return [
        make_record(
            "1",
            "https://a.example/",
            timing={"connect_start": 10, "connect_end": 60, "ssl_start": 30, "ssl_end": 60},
        ),
        make_record(
            "2",
            "http://b.example/",
            timing={"connect_start": 1, "connect_end": 41},
        ),
    ]


@pytest.fixture
def coarse_record():
    """HTTPS record with download and send-start timing but no connect phase."""
    return make_record(
        "1",
        "https://a.example/",
        start_time=0.0,
        end_time=1.0,
        transfer_size=14336 * 4,
        timing={"send_start": 100, "receive_headers_end": 200},
    )
