"""
Structured record for one CloudFront download-distribution log line.
"""

from dataclasses import astuple, dataclass, fields, replace
from typing import Optional


@dataclass
class CfLogRecord:
    """
    One row of a CloudFront access log, ready for bulk ingestion.

    Fields are declared in output column order. The date and time tokens of
    the log line are folded into ``timestamp``; everything else maps one
    token to one field.

    Fields:
        timestamp: "YYYY-MM-DD hh:mm:ss" built from the date and time tokens
        edge_location: Edge location code (x-edge-location)
        bytes_sent: Response size in bytes, None when logged as "-"
        client_ip: Client IP address
        method: HTTP method, not validated
        host: CloudFront domain name
        request_uri: Object path (cs-uri-stem)
        status_code: HTTP status, None when logged as "-"
        referrer: Referer header
        user_agent: User-Agent header
        query_string: Everything after the user agent, unparsed

    A record handed out by a parser in reuse mode is overwritten by that
    parser's next call. Call copy() to keep it.
    """

    timestamp: Optional[str] = None
    edge_location: Optional[str] = None
    bytes_sent: Optional[int] = None
    client_ip: Optional[str] = None
    method: Optional[str] = None
    host: Optional[str] = None
    request_uri: Optional[str] = None
    status_code: Optional[int] = None
    referrer: Optional[str] = None
    user_agent: Optional[str] = None
    query_string: Optional[str] = None
    # TODO: add query_map once query strings are decoded into key/value pairs

    def to_dict(self) -> dict:
        """
        Convert to dictionary representation.

        Returns:
            Dictionary of field name to value, in column order
        """
        return {name: getattr(self, name) for name in FIELD_NAMES}

    def to_row(self) -> tuple:
        """Return field values as a tuple in column order, for bulk inserts."""
        return astuple(self)

    def copy(self) -> "CfLogRecord":
        """Return an independent copy of this record."""
        return replace(self)


FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in fields(CfLogRecord))
