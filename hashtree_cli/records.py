"""
Record loading for CLI commands.

Records come from a text file (one record per line) and/or repeated
--record options, in that order. Text is encoded with the configured
record encoding before hashing.
"""

from __future__ import annotations

import logging
from argparse import Namespace
from pathlib import Path

from hashtree.config import RuntimeConfig
from hashtree.crypto.hashing import from_hex


logger = logging.getLogger(__name__)


class RecordInputError(Exception):
    """Raised when records cannot be read from the command line inputs."""


def encode_record(text: str, config: RuntimeConfig) -> bytes:
    """Encode one textual record with the configured encoding."""
    return text.encode(config.tree.record_encoding)


def split_record_lines(text: str) -> list[str]:
    """
    Split file text into records on "\\n" only.

    A "\\r" directly before the "\\n" is dropped so CRLF files read the same
    as LF files; any other control character stays inside its record.
    """
    lines = text.split("\n")
    last = lines.pop()
    records = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        records.append(last)
    return records


def load_records(args: Namespace, config: RuntimeConfig) -> list[bytes]:
    """
    Collect records from --records FILE and --record VALUE options.

    Trailing newlines are not part of a record; blank lines in the middle
    of a file are kept as empty records.
    """
    records: list[bytes] = []
    encoding = config.tree.record_encoding

    records_file = getattr(args, "records", None)
    if records_file:
        path = Path(records_file)
        if not path.is_file():
            raise RecordInputError(f"Records file not found: {path}")
        try:
            text = path.read_bytes().decode(encoding)
        except UnicodeDecodeError as e:
            raise RecordInputError(f"Cannot decode {path} as {encoding}: {e}") from e
        records.extend(line.encode(encoding) for line in split_record_lines(text))
        logger.debug(f"Read {len(records)} records from {path}")

    for value in getattr(args, "record", None) or []:
        records.append(value.encode(encoding))

    return records


def parse_digest(text: str) -> bytes:
    """Parse a digest given as hex, with or without a 0x prefix."""
    text = text.strip().lower()
    if text in ("", "0x"):
        raise ValueError("Digest is empty")
    if not text.startswith("0x"):
        text = "0x" + text
    return from_hex(text)
