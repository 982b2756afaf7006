"""
Line-oriented reading of delimited input tables.

Fields are split on a single delimiter character; quoting and embedded
delimiters are not supported.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

import structlog

from ..errors import SourceUnavailableError

logger = structlog.get_logger(__name__)

Source = Union[str, Path]


@dataclass(frozen=True)
class RawRow:
    """Fields of one input line together with its position."""
    line_number: int           # 1-based line number in the source
    fields: list[str]
    raw: str

    def field(self, index: int) -> str:
        return self.fields[index].strip()


def read_records(
    source: Source,
    *,
    skip_header: bool = False,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> list[RawRow]:
    """
    Read every non-blank line of a delimited text source.

    The file handle is released on every exit path, including decoding
    failures half way through the file.

    Args:
        source: Path to the input table
        skip_header: Drop the first non-blank line
        delimiter: Field separator
        encoding: Text encoding of the source

    Returns:
        Rows in file order

    Raises:
        SourceUnavailableError: If the source cannot be opened or decoded
    """
    path = Path(source)
    rows = []
    header_pending = skip_header

    try:
        with open(path, encoding=encoding, newline="") as f:
            for line_number, line in enumerate(f, start=1):
                text = line.rstrip("\r\n")
                if not text.strip():
                    continue
                if header_pending:
                    header_pending = False
                    continue
                rows.append(RawRow(
                    line_number=line_number,
                    fields=text.split(delimiter),
                    raw=text,
                ))
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise SourceUnavailableError(
            f"Cannot read source {path}: {e}",
            source=str(path),
            context={"encoding": encoding}
        ) from e

    logger.info(
        "Source loaded",
        source=str(path),
        rows=len(rows),
        header_skipped=skip_header
    )
    return rows
