"""
Column schema for CloudFront log records.

Lists the columns a host needs to declare its table, in the same order as
CfLogRecord fields and CfLogRecord.to_row().
"""

# =============================================================================
# CloudFront Log Columns (Hive types)
# =============================================================================

CF_LOG_COLUMNS = {
    "timestamp": "STRING",
    "edge_location": "STRING",
    "bytes_sent": "INT",
    "client_ip": "STRING",
    "method": "STRING",
    "host": "STRING",
    "request_uri": "STRING",
    "status_code": "INT",
    "referrer": "STRING",
    "user_agent": "STRING",
    "query_string": "STRING",
}


def get_column_names() -> list[str]:
    """Get column names in record order."""
    return list(CF_LOG_COLUMNS.keys())


def get_column_types() -> list[str]:
    """Get column types in record order."""
    return list(CF_LOG_COLUMNS.values())
