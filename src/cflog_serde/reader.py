"""
Streaming reader for CloudFront access log files.

Feeds each line of a (possibly gzipped) log file through a
CfLogDeserializer. Directive lines such as ``#Version:`` and ``#Fields:``
and blank lines are skipped.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from .config.settings import ParserSettings
from .deserializer import CfLogDeserializer
from .exceptions import CfLogError, LogFileError
from .file_utils import open_file_auto_decompress
from .record import CfLogRecord

logger = logging.getLogger(__name__)


def parse_log_file(
    file_path: Union[str, Path],
    settings: Optional[ParserSettings] = None,
    strict: bool = True,
) -> Iterator[CfLogRecord]:
    """
    Parse a CloudFront access log file and yield one record per log line.

    Args:
        file_path: Path to the log file (plain or gzip-compressed)
        settings: Parser settings; with reuse_record set, each yielded record
                  is overwritten by the next one
        strict: If True, stop at the first bad line; otherwise skip it

    Yields:
        CfLogRecord objects

    Raises:
        FileNotFoundError: If file doesn't exist
        LogFileError: In strict mode, for the first line that fails to parse
    """
    deserializer = CfLogDeserializer(settings)
    records_parsed = 0
    records_skipped = 0

    logger.info(f"Parsing CloudFront log file: {file_path}")

    with open_file_auto_decompress(file_path) as f:
        for line_number, raw_line in enumerate(f, start=1):
            stripped = raw_line.strip()
            if not stripped or stripped.startswith(b"#"):
                continue

            try:
                record = deserializer.deserialize(raw_line)
            except CfLogError as e:
                if strict:
                    raise LogFileError(
                        f"Failed to parse {file_path}: {type(e).__name__}",
                        line_number=line_number,
                        line_content=raw_line.decode("utf-8", "replace").rstrip("\r\n"),
                    ) from e
                logger.debug(f"Skipping line {line_number}: {e}")
                records_skipped += 1
                continue

            records_parsed += 1
            yield record

    logger.info(
        f"CloudFront parsing complete: {records_parsed} records parsed, "
        f"{records_skipped} skipped"
    )
