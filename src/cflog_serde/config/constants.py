"""
Constants for the CloudFront access log grammar and Hive output format.
"""

# =============================================================================
# Log Grammar
# =============================================================================

# AWS writes a single "-" for missing values
ABSENT_SENTINEL = "-"

# Token names in log order (adapted from Amazon's cloudfront-loganalyzer)
#   date            / date
#   time            / time
#   edge_location   / x-edge-location
#   bytes_sent      / sc-bytes
#   client_ip       / c-ip
#   method          / cs-method
#   host            / cs(Host)
#   request_uri     / cs-uri-stem
#   status_code     / sc-status
#   referrer        / cs(Referer)
#   user_agent      / cs(User-Agent)
#   query_string    / cs-uri-query
TOKEN_NAMES = (
    "date",
    "time",
    "edge_location",
    "bytes_sent",
    "client_ip",
    "method",
    "host",
    "request_uri",
    "status_code",
    "referrer",
    "user_agent",
    "query_string",
)

# =============================================================================
# Date Formats
# =============================================================================

# CloudFront/CLF style: date token "01/Jul/2012:15:00:00", time token "+0000"
CF_DATE_FORMAT = "%d/%b/%Y:%H:%M:%S %z"

# W3C style as written by CloudFront: "2012-07-01" "15:00:00", always UTC
W3C_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Hive timestamp layouts. The 12-hour variant keeps the historical "hh" output.
HIVE_DATE_FORMAT_12H = "%Y-%m-%d %I:%M:%S"
HIVE_DATE_FORMAT_24H = "%Y-%m-%d %H:%M:%S"

# =============================================================================
# Numeric Ranges
# =============================================================================

# Hive INT columns are 32-bit signed
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# =============================================================================
# Settings Defaults
# =============================================================================

DEFAULT_ENCODING = "utf-8"
DEFAULT_OUTPUT_TIMEZONE = "UTC"
VALID_ENCODING_ERRORS = frozenset(["strict", "replace", "ignore"])

# Settings environment variable prefix
ENV_PREFIX = "CFLOG_"
