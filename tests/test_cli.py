import json
from pathlib import Path

from net_timing.__main__ import main


def _records_file(tmp_path: Path, records) -> Path:
    path = tmp_path / "records.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


RECORDS = [
    {
        "requestId": "1",
        "url": "https://a.example/",
        "connectionId": 1,
        "startTime": 0,
        "endTime": 1,
        "timing": {"connectStart": 10, "connectEnd": 60, "sendStart": 80, "sendEnd": 70, "receiveHeadersEnd": 170},
    }
]


def test_cli_rtt_json(tmp_path: Path, capsys):
    assert main(["rtt", str(_records_file(tmp_path, RECORDS))]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows == [
        {"origin": "https://a.example", "min": 50, "max": 50, "avg": 50.0, "median": 50},
        {"origin": "(all)", "min": 50, "max": 50, "avg": 50.0, "median": 50},
    ]


def test_cli_forced_coarse_csv(tmp_path: Path, capsys):
    path = _records_file(tmp_path, RECORDS)
    assert main(["rtt", str(path), "--force-coarse", "--multiplier", "1", "--format", "csv"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "origin,min,max,avg,median"
    assert lines[1].startswith("https://a.example,40.0")


def test_cli_response_time(tmp_path: Path, capsys):
    assert main(["response-time", str(_records_file(tmp_path, RECORDS))]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert rows[0]["min"] == 50


def test_cli_reports_missing_timing(tmp_path: Path, capsys):
    path = _records_file(tmp_path, [{"requestId": "1", "url": "https://a.example/"}])
    assert main(["rtt", str(path)]) == 1
    err = capsys.readouterr().err
    assert "No timing information available" in err
    assert "hint:" in err


def test_cli_json_keeps_urls_unescaped(tmp_path: Path, capsys):
    assert main(["rtt", str(_records_file(tmp_path, RECORDS))]) == 0
    out = capsys.readouterr().out
    assert '"https://a.example"' in out
    assert "\\/" not in out
