"""
Row parsers converting raw table rows into canonical records.

Column layouts:
    plans:   plan_id, state, metal_level, rate, rate_area
    zips:    zipcode, state, county_code, name, rate_area
    targets: zipcode[, rate]

Any row that cannot be converted raises MalformedRecordError. There is no
per-row recovery: the first bad row stops the run.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

from ..errors import MalformedRecordError
from .models import PlanRecord, TargetZip, ZipRecord
from .sources import RawRow, Source, read_records

PLAN_FIELD_COUNT = 5
ZIP_FIELD_COUNT = 5

PLAN_COLUMNS = "plan_id,state,metal_level,rate,rate_area"
ZIP_COLUMNS = "zipcode,state,county_code,name,rate_area"
TARGET_COLUMNS = "zipcode[,rate]"


def parse_rate(value: str) -> Decimal:
    """
    Parse a currency amount into a Decimal.

    Raises:
        ValueError: If the value is not a finite decimal number
    """
    try:
        rate = Decimal(value.strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid rate: {value!r}") from e

    if not rate.is_finite():
        raise ValueError(f"Invalid rate: {value!r}")

    return rate


def _require_fields(row: RawRow, count: int, source: Optional[str], columns: str) -> None:
    if len(row.fields) < count:
        raise MalformedRecordError(
            f"Expected {count} fields, got {len(row.fields)}",
            source=source,
            line_number=row.line_number,
            raw_data=row.raw,
            expected_format=columns
        )


def parse_plan_row(row: RawRow, source: Optional[str] = None) -> PlanRecord:
    """Convert a plans table row into a PlanRecord."""
    _require_fields(row, PLAN_FIELD_COUNT, source, PLAN_COLUMNS)

    try:
        rate = parse_rate(row.fields[3])
    except ValueError as e:
        raise MalformedRecordError(
            str(e),
            source=source,
            line_number=row.line_number,
            raw_data=row.raw,
            expected_format=PLAN_COLUMNS
        ) from e

    return PlanRecord(
        plan_id=row.field(0),
        state=row.field(1),
        metal_level=row.field(2),
        rate=rate,
        rate_area=row.field(4),
    )


def parse_zip_row(row: RawRow, source: Optional[str] = None) -> ZipRecord:
    """Convert a zips table row into a ZipRecord."""
    _require_fields(row, ZIP_FIELD_COUNT, source, ZIP_COLUMNS)

    return ZipRecord(
        zip_code=row.field(0),
        state=row.field(1),
        county_code=row.field(2),
        county_name=row.field(3),
        rate_area=row.field(4),
    )


def parse_target_row(row: RawRow, source: Optional[str] = None) -> TargetZip:
    """Convert a target list row into a TargetZip.

    Only the first field is used; the trailing empty rate column of the
    target file is ignored.
    """
    zip_code = row.field(0)
    if not zip_code:
        raise MalformedRecordError(
            "Missing ZIP code",
            source=source,
            line_number=row.line_number,
            raw_data=row.raw,
            expected_format=TARGET_COLUMNS
        )
    return TargetZip(zip_code=zip_code, line_number=row.line_number)


def load_plans(
    source: Source,
    metal_level: str = "Silver",
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> list[PlanRecord]:
    """
    Load the plans of one metal level.

    The header row is not skipped explicitly; it is dropped by the metal
    level filter, which runs before the rate is parsed.
    """
    rows = read_records(source, skip_header=False, delimiter=delimiter, encoding=encoding)
    name = str(source)
    plans = []

    for row in rows:
        _require_fields(row, PLAN_FIELD_COUNT, name, PLAN_COLUMNS)
        if row.field(2) != metal_level:
            continue
        plans.append(parse_plan_row(row, name))

    return plans


def load_zips(
    source: Source,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> list[ZipRecord]:
    """Load the ZIP-to-rating-area table, skipping its header."""
    rows = read_records(source, skip_header=True, delimiter=delimiter, encoding=encoding)
    name = str(source)
    return [parse_zip_row(row, name) for row in rows]


def load_targets(
    source: Source,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> list[TargetZip]:
    """Load the ordered target ZIP list, skipping its header."""
    rows = read_records(source, skip_header=True, delimiter=delimiter, encoding=encoding)
    name = str(source)
    return [parse_target_row(row, name) for row in rows]
