"""
Unit tests for streaming log file parsing.

Includes tests for gzip-compressed files and header directives.
"""

import gzip
import logging
from pathlib import Path

import pytest

from cflog_serde import (
    LogFileError,
    MalformedLineError,
    ParserSettings,
    parse_log_file,
)
from cflog_serde.file_utils import open_file_auto_decompress

HEADER = (
    "#Version: 1.0\n"
    "#Fields: date time x-edge-location sc-bytes c-ip cs-method cs(Host) "
    "cs-uri-stem sc-status cs(Referer) cs(User-Agent) cs-uri-query\n"
)


@pytest.fixture
def log_lines(make_line) -> list[str]:
    return [
        make_line(client_ip="192.0.2.1"),
        make_line(client_ip="192.0.2.2", bytes_sent="-"),
        make_line(client_ip="192.0.2.3", status_code="404"),
    ]


class TestParseLogFile:
    """Tests for parse_log_file."""

    def test_fixture_file(self, fixtures_dir: Path):
        """The sample CloudFront log parses completely."""
        records = list(parse_log_file(fixtures_dir / "sample.log"))

        assert len(records) == 5
        first = records[0]
        assert first.timestamp == "2012-07-01 03:00:00"
        assert first.host == "d111111abcdef8.cloudfront.net"
        assert first.user_agent == "Mozilla/5.0%20(Windows%20NT%206.1)"
        assert records[1].bytes_sent is None
        assert records[3].status_code is None
        assert records[4].query_string == "q=two words here"

    def test_skips_header_and_blank_lines(self, tmp_path: Path, log_lines):
        """Directive and blank lines are not records."""
        log_file = tmp_path / "E123.2012-07-01-15.log"
        log_file.write_text(HEADER + "\n".join(log_lines) + "\n\n")

        records = list(parse_log_file(log_file))
        assert [r.client_ip for r in records] == ["192.0.2.1", "192.0.2.2", "192.0.2.3"]
        assert records[2].status_code == 404

    def test_gzip_file(self, tmp_path: Path, log_lines):
        """Gzip files are read transparently."""
        log_file = tmp_path / "E123.2012-07-01-15.abcd.gz"
        with gzip.open(log_file, "wt", encoding="utf-8") as f:
            f.write(HEADER + "\n".join(log_lines) + "\n")

        assert len(list(parse_log_file(log_file))) == 3

    def test_gzip_without_extension(self, tmp_path: Path, log_lines):
        """Gzip magic bytes are detected without a .gz suffix."""
        log_file = tmp_path / "cloudfront.log"
        log_file.write_bytes(gzip.compress(("\n".join(log_lines) + "\n").encode("utf-8")))

        with open_file_auto_decompress(log_file) as f:
            assert isinstance(f, gzip.GzipFile)
        assert len(list(parse_log_file(log_file))) == 3

    def test_strict_stops_at_bad_line(self, tmp_path: Path, log_lines):
        """Strict mode raises LogFileError chained to the line error."""
        log_file = tmp_path / "bad.log"
        log_file.write_text(HEADER + log_lines[0] + "\nnot a log line\n" + log_lines[1] + "\n")

        with pytest.raises(LogFileError) as exc_info:
            list(parse_log_file(log_file))

        error = exc_info.value
        assert error.line_number == 4
        assert error.line_content == "not a log line"
        assert isinstance(error.__cause__, MalformedLineError)

    def test_non_strict_skips_bad_lines(self, tmp_path: Path, log_lines):
        """Non-strict mode skips bad lines and keeps going."""
        log_file = tmp_path / "bad.log"
        content = (
            log_lines[0].encode("utf-8")
            + b"\nnot a log line\n"
            + b"\xff\xfe broken bytes\n"
            + log_lines[1].encode("utf-8")
            + b"\n"
        )
        log_file.write_bytes(content)

        records = list(parse_log_file(log_file, strict=False))
        assert [r.client_ip for r in records] == ["192.0.2.1", "192.0.2.2"]

    def test_summary_logged(self, tmp_path: Path, log_lines, caplog):
        """Parsed and skipped counts are logged."""
        caplog.set_level(logging.INFO, logger="cflog_serde.reader")
        log_file = tmp_path / "cf.log"
        log_file.write_text("\n".join(log_lines + ["garbage"]) + "\n")

        list(parse_log_file(log_file, strict=False))
        assert "3 records parsed, 1 skipped" in caplog.text

    def test_reuse_mode_yields_same_object(self, tmp_path: Path, log_lines):
        """With reuse_record, callers must copy records they keep."""
        log_file = tmp_path / "cf.log"
        log_file.write_text("\n".join(log_lines) + "\n")

        seen = []
        kept = []
        for record in parse_log_file(log_file, settings=ParserSettings(reuse_record=True)):
            seen.append(record)
            kept.append(record.copy())

        assert all(record is seen[0] for record in seen)
        assert [r.client_ip for r in kept] == ["192.0.2.1", "192.0.2.2", "192.0.2.3"]

    def test_missing_file(self, tmp_path: Path):
        """A missing path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            list(parse_log_file(tmp_path / "missing.log"))
