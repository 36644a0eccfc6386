"""
Field-level type coercions for CloudFront log tokens.

AWS writes a single "-" for missing values. The helpers here turn raw
tokens into record values and raise typed errors for anything that does
not convert.
"""

import re
from datetime import datetime, timezone, tzinfo
from typing import Optional

from .config.constants import (
    ABSENT_SENTINEL,
    CF_DATE_FORMAT,
    HIVE_DATE_FORMAT_12H,
    HIVE_DATE_FORMAT_24H,
    INT_MAX,
    INT_MIN,
    W3C_DATE_FORMAT,
)
from .exceptions import InvalidNumericFieldError, InvalidTimestampError

# ASCII base-10 only: int() alone would also accept "1_000" and non-ASCII digits
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def to_optional_int(value: str, field: str) -> Optional[int]:
    """
    Convert a numeric token to an integer, treating "-" as absent.

    Args:
        value: Raw token
        field: Record field name, for error reporting

    Returns:
        The integer, or None if the token was "-"

    Raises:
        InvalidNumericFieldError: If the token is not a 32-bit base-10 integer
    """
    if value == ABSENT_SENTINEL:
        return None

    if not _INTEGER_PATTERN.fullmatch(value):
        raise InvalidNumericFieldError(
            "Numeric field is not an integer", field=field, value=value
        )

    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        raise InvalidNumericFieldError(
            "Numeric field is out of 32-bit integer range", field=field, value=value
        )
    return number


def nullify_hyphen(value: str) -> Optional[str]:
    """
    Turn a "-" token into None.

    Useful for "-" URIs (the URI is logged as "-" if e.g. the
    distribution is accessed from a file:// protocol).
    """
    if value == ABSENT_SENTINEL:
        return None
    return value


def parse_cloudfront_datetime(date: str, time: str) -> datetime:
    """
    Parse CloudFront date and time tokens into an aware datetime.

    Accepts the CLF layout, where the date token carries the clock and the
    time token carries the UTC offset ("01/Jul/2012:15:00:00" "+0000"), and
    the W3C layout CloudFront writes ("2012-07-01" "15:00:00", in UTC).

    Raises:
        InvalidTimestampError: If neither layout matches
    """
    value = f"{date} {time}"

    try:
        return datetime.strptime(value, CF_DATE_FORMAT)
    except ValueError:
        pass

    try:
        return datetime.strptime(value, W3C_DATE_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        pass

    raise InvalidTimestampError("Unparseable CloudFront date/time", value=value)


def to_output_timestamp(
    date: str,
    time: str,
    output_tz: tzinfo = timezone.utc,
    twelve_hour: bool = True,
) -> str:
    """
    Convert CloudFront date and time tokens to a Hive timestamp string.

    Args:
        date: Date token from the log line
        time: Time token from the log line
        output_tz: Zone the output is rendered in
        twelve_hour: Render the hour as 01-12 without an AM/PM marker

    Returns:
        Timestamp formatted as "YYYY-MM-DD hh:mm:ss"

    Raises:
        InvalidTimestampError: If the tokens cannot be parsed
    """
    dt = parse_cloudfront_datetime(date, time).astimezone(output_tz)
    return dt.strftime(HIVE_DATE_FORMAT_12H if twelve_hour else HIVE_DATE_FORMAT_24H)
