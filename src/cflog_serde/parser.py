"""
CloudFront download-distribution access log line parser.

Recognizes the fixed 12-token CloudFront log grammar (the format that
predates the extended W3C log) and decodes one line into a CfLogRecord.

Log line layout (whitespace separated):
    date time x-edge-location sc-bytes c-ip cs-method cs(Host) cs-uri-stem
    sc-status cs(Referer) cs(User-Agent) cs-uri-query

The last token takes everything up to the end of the line, so a query
string with embedded whitespace still parses.
"""

import re
from typing import Optional

from dateutil import tz

from .coercions import nullify_hyphen, to_optional_int, to_output_timestamp
from .config.constants import TOKEN_NAMES
from .config.settings import ParserSettings
from .exceptions import ConfigurationError, MalformedLineError
from .record import CfLogRecord

_WHITESPACE = r"\s+"
_TOKEN = r"(\S+)"

# Eleven whitespace-free tokens, then the query string to end of line.
# ASCII whitespace only: NBSP and other Unicode spaces stay inside a token.
CF_LINE_PATTERN = re.compile(
    _WHITESPACE.join([_TOKEN] * (len(TOKEN_NAMES) - 1) + [r"(.+)"]),
    re.ASCII,
)


class CfLogParser:
    """
    Parser for single CloudFront access log lines.

    Each call to parse() either returns a fully populated record or raises
    one of MalformedLineError, InvalidTimestampError or
    InvalidNumericFieldError. Records are never partially filled.

    By default every call returns a new record and the parser can be shared.
    With ``reuse_record`` enabled the parser overwrites and returns the same
    instance on every call, which is cheaper for bulk loads but means:
    - a returned record is only valid until the next parse() call
    - one parser per thread, callers copy() what they keep

    Usage:
        parser = CfLogParser()
        record = parser.parse(line)
        print(record.timestamp, record.client_ip)
    """

    def __init__(self, settings: Optional[ParserSettings] = None):
        """
        Initialize the parser.

        Args:
            settings: Parser settings (defaults to ParserSettings())

        Raises:
            ConfigurationError: If the settings do not validate
        """
        self.settings = settings or ParserSettings()

        errors = self.settings.validate()
        if errors:
            raise ConfigurationError("Invalid parser settings", errors=errors)

        self._output_tz = tz.gettz(self.settings.output_timezone)
        self._record: Optional[CfLogRecord] = (
            CfLogRecord() if self.settings.reuse_record else None
        )

    @property
    def reuses_record(self) -> bool:
        """True if parse() overwrites a single shared record."""
        return self._record is not None

    def parse(self, line: str) -> CfLogRecord:
        """
        Parse one raw log line.

        Args:
            line: The raw line; a trailing newline is ignored

        Returns:
            The decoded record (the shared instance in reuse mode)

        Raises:
            MalformedLineError: If the line does not match the grammar
            InvalidTimestampError: If the date/time tokens cannot be parsed
            InvalidNumericFieldError: If bytes_sent or status_code is not an integer
        """
        match = CF_LINE_PATTERN.fullmatch(line.rstrip("\r\n"))
        if match is None:
            raise MalformedLineError("CloudFront log line did not match", line=line)

        (
            date,
            time,
            edge_location,
            bytes_sent,
            client_ip,
            method,
            host,
            request_uri,
            status_code,
            referrer,
            user_agent,
            query_string,
        ) = match.groups()

        # Decode everything before touching the record so failures leave it as-is
        timestamp = to_output_timestamp(
            date,
            time,
            output_tz=self._output_tz,
            twelve_hour=self.settings.twelve_hour_output,
        )
        bytes_sent_value = to_optional_int(bytes_sent, "bytes_sent")
        status_code_value = to_optional_int(status_code, "status_code")

        if self.settings.nullify_hyphens:
            request_uri = nullify_hyphen(request_uri)
            referrer = nullify_hyphen(referrer)

        record = self._record if self._record is not None else CfLogRecord()
        record.timestamp = timestamp
        record.edge_location = edge_location
        record.bytes_sent = bytes_sent_value
        record.client_ip = client_ip
        record.method = method
        record.host = host
        record.request_uri = request_uri
        record.status_code = status_code_value
        record.referrer = referrer
        record.user_agent = user_agent
        record.query_string = query_string
        return record
