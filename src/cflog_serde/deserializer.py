"""
Host-facing deserializer for CloudFront access log rows.

Accepts rows either as already-decoded text or as raw bytes and funnels
both into CfLogParser.parse().
"""

import logging
from typing import Optional, Union

from .config.settings import ParserSettings
from .exceptions import EncodingError
from .parser import CfLogParser
from .record import CfLogRecord
from .schema import CF_LOG_COLUMNS

logger = logging.getLogger(__name__)

Blob = Union[str, bytes, bytearray, memoryview]


class CfLogDeserializer:
    """
    Reads CloudFront download distribution access log rows into records.

    Usage:
        deserializer = CfLogDeserializer()
        for blob in rows:
            record = deserializer.deserialize(blob)

    The same reuse rules as CfLogParser apply: with ``reuse_record`` set,
    every call returns the same record object.
    """

    def __init__(self, settings: Optional[ParserSettings] = None):
        self.settings = settings or ParserSettings()
        self._parser = CfLogParser(self.settings)
        logger.debug(f"{type(self).__name__} initialized: {self.settings.to_dict()}")

    @property
    def parser(self) -> CfLogParser:
        """The underlying line parser."""
        return self._parser

    @property
    def columns(self) -> list[tuple[str, str]]:
        """Output columns as (name, type) pairs, in record order."""
        return list(CF_LOG_COLUMNS.items())

    def deserialize(self, blob: Blob) -> CfLogRecord:
        """
        Deserialize one row.

        Args:
            blob: The row as text or as encoded bytes

        Returns:
            The decoded record

        Raises:
            EncodingError: If bytes cannot be decoded with the configured encoding
            TypeError: If blob is neither text nor bytes-like
            MalformedLineError, InvalidTimestampError, InvalidNumericFieldError:
                as raised by CfLogParser.parse()
        """
        return self._parser.parse(self.decode(blob))

    def decode(self, blob: Blob) -> str:
        """Return the row as text, decoding bytes-like input."""
        if isinstance(blob, str):
            return blob

        if isinstance(blob, (bytes, bytearray, memoryview)):
            raw = bytes(blob)
            try:
                return raw.decode(self.settings.encoding, self.settings.encoding_errors)
            except UnicodeDecodeError as e:
                raise EncodingError(
                    "Could not decode log row",
                    raw=raw,
                    encoding=self.settings.encoding,
                    reason=e.reason,
                ) from e

        raise TypeError(
            f"{type(self).__name__} expects str or bytes, got {type(blob).__name__}"
        )
