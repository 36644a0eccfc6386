"""
CloudFront download-distribution access log deserialization.

Turns raw CloudFront access log lines into fixed-schema records for bulk
loading into an analytic store.

Usage:
    from cflog_serde import CfLogParser, CfLogDeserializer, parse_log_file

    # Parse a single line
    parser = CfLogParser()
    record = parser.parse(line)

    # Rows from a host, as text or bytes
    deserializer = CfLogDeserializer()
    record = deserializer.deserialize(b"...")

    # Stream a whole (gzipped) log file
    for record in parse_log_file("/path/to/E123.2012-07-01-15.abcd.gz"):
        print(record.timestamp, record.client_ip)
"""

from .coercions import nullify_hyphen, to_optional_int, to_output_timestamp
from .config import ParserSettings, clear_settings_cache, get_settings
from .deserializer import CfLogDeserializer
from .exceptions import (
    CfLogError,
    ConfigurationError,
    EncodingError,
    InvalidNumericFieldError,
    InvalidTimestampError,
    LogFileError,
    MalformedLineError,
)
from .parser import CF_LINE_PATTERN, CfLogParser
from .reader import parse_log_file
from .record import FIELD_NAMES, CfLogRecord
from .schema import CF_LOG_COLUMNS, get_column_names, get_column_types
from .utils import setup_logging

__all__ = [
    # Parsing
    "CfLogParser",
    "CF_LINE_PATTERN",
    "CfLogDeserializer",
    "parse_log_file",
    # Records and schema
    "CfLogRecord",
    "FIELD_NAMES",
    "CF_LOG_COLUMNS",
    "get_column_names",
    "get_column_types",
    # Coercions
    "to_optional_int",
    "nullify_hyphen",
    "to_output_timestamp",
    # Exceptions
    "CfLogError",
    "EncodingError",
    "MalformedLineError",
    "InvalidTimestampError",
    "InvalidNumericFieldError",
    "LogFileError",
    "ConfigurationError",
    # Configuration
    "ParserSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "setup_logging",
]
