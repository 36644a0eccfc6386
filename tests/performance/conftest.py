"""
Pytest configuration and fixtures for performance tests.

Provides fixtures for generating large CloudFront log files.
"""

import gzip
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest


def _log_line(i: int, base_time: datetime) -> str:
    """Build one tab-separated CloudFront log line."""
    ts = base_time + timedelta(seconds=i)
    # Generate valid IP addresses using modular arithmetic
    octet3 = (i // 256) % 256
    octet4 = i % 256
    fields = [
        ts.strftime("%Y-%m-%d"),
        ts.strftime("%H:%M:%S"),
        ["FRA2", "LHR5", "IAD12"][i % 3],
        str(1024 + i % 4096) if i % 10 else "-",
        f"192.168.{octet3}.{octet4}",
        ["GET", "HEAD"][i % 2],
        "d111111abcdef8.cloudfront.net",
        f"/downloads/file-{i}.zip",
        "200" if i % 7 else "304",
        "-",
        "Mozilla/5.0%20(compatible;%20GPTBot/1.0)",
        f"id={i}&v=2",
    ]
    return "\t".join(fields)


@pytest.fixture
def log_lines_generator():
    """Factory fixture returning a list of in-memory log lines."""

    def _generate(num_lines: int) -> list[str]:
        base_time = datetime(2012, 7, 1, tzinfo=timezone.utc)
        return [_log_line(i, base_time) for i in range(num_lines)]

    return _generate


@pytest.fixture
def log_file_generator(log_lines_generator):
    """Factory fixture for generating log files with specified number of lines."""

    def _generate(num_lines: int, compressed: bool = False) -> Path:
        """Generate a CloudFront log file with the specified number of lines."""
        suffix = ".log.gz" if compressed else ".log"
        temp_file = tempfile.NamedTemporaryFile(suffix=suffix, delete=False)
        temp_file.close()

        content = "#Version: 1.0\n" + "\n".join(log_lines_generator(num_lines)) + "\n"
        if compressed:
            with gzip.open(temp_file.name, "wt", encoding="utf-8") as f:
                f.write(content)
        else:
            Path(temp_file.name).write_text(content, encoding="utf-8")

        return Path(temp_file.name)

    return _generate
