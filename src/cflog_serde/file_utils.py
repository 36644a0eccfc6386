"""
Shared file utilities for reading CloudFront log files.
"""

import gzip
from pathlib import Path
from typing import IO, Union


def open_file_auto_decompress(file_path: Union[str, Path]) -> IO[bytes]:
    """
    Open a file in binary mode, automatically detecting gzip compression.

    CloudFront delivers its logs gzipped. Gzip detection is performed by:
    1. Checking for .gz file extension
    2. Checking for gzip magic bytes (0x1f 0x8b) even without .gz extension

    Lines are returned undecoded so that decoding errors surface per line.

    Args:
        file_path: Path to the file

    Returns:
        Open file handle (binary mode)

    Raises:
        FileNotFoundError: If file doesn't exist
        PermissionError: If file cannot be read
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    if path.suffix.lower() == ".gz":
        return gzip.open(path, "rb")

    with open(path, "rb") as f:
        magic = f.read(2)
    if magic == b"\x1f\x8b":
        return gzip.open(path, "rb")

    return open(path, "rb")
