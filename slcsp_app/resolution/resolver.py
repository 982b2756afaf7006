"""
Second lowest cost Silver plan resolution.

Each target ZIP resolves independently against two read-only indices:

1. the ZIP must map to exactly one rating area, otherwise the rate is empty;
2. the area's rates are reduced to distinct values in ascending order;
3. the second value is the answer; fewer than two distinct values leave the
   rate empty.
"""

from concurrent.futures import ThreadPoolExecutor
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable, Optional, Sequence

from ..data.models import TargetZip
from ..index import RateIndex, ZipIndex
from ..logging.config import get_resolution_logger, log_resolution
from .models import Resolution, ResolutionOutcome

resolution_logger = get_resolution_logger(__name__)

DEFAULT_HEADER = "zipcode,rate"


def second_lowest_rate(rates: Iterable[Decimal]) -> Optional[Decimal]:
    """
    Second smallest distinct rate.

    Args:
        rates: Rates of one rating area, duplicates allowed

    Returns:
        The second value of the ascending distinct rates, or None when there
        are fewer than two distinct rates
    """
    distinct = sorted(set(rates))
    if len(distinct) < 2:
        return None
    return distinct[1]


def format_rate(rate: Optional[Decimal], places: int = 2) -> str:
    """Render a rate rounded half-up to a fixed number of decimals; '' for None."""
    if rate is None:
        return ""
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # quantize fails when the result needs more digits than the precision
        ctx.prec = max(ctx.prec, rate.adjusted() + places + 2)
        return format(rate.quantize(quantum, rounding=ROUND_HALF_UP), "f")


def format_line(zip_code: str, rate_text: str, strict_legacy_format: bool = True) -> str:
    """
    Build one output line.

    In legacy format the rate is appended to the ZIP with no separator, so an
    unresolved ZIP is the bare ZIP code. Otherwise every line is
    '<zip>,<rate>', with an empty rate after the comma when unresolved.
    """
    if strict_legacy_format:
        return f"{zip_code}{rate_text}"
    return f"{zip_code},{rate_text}"


def resolve(target_zip: str, zip_index: ZipIndex, rate_index: RateIndex) -> Resolution:
    """
    Resolve the second lowest rate for one ZIP.

    Args:
        target_zip: ZIP code to resolve
        zip_index: ZIP -> rating areas index
        rate_index: Rating area -> rates index

    Returns:
        Resolution carrying the outcome and, when resolved, the rate
    """
    areas = zip_index.lookup(target_zip)

    if not areas:
        result = Resolution(zip_code=target_zip, outcome=ResolutionOutcome.UNKNOWN_ZIP)
    elif len(areas) > 1:
        result = Resolution(zip_code=target_zip, outcome=ResolutionOutcome.AMBIGUOUS_ZIP)
    else:
        (area,) = areas
        rates = rate_index.lookup(area)
        rate = second_lowest_rate(rates)

        if rate is not None:
            outcome = ResolutionOutcome.RESOLVED
        elif rates:
            outcome = ResolutionOutcome.SINGLE_RATE
        else:
            outcome = ResolutionOutcome.NO_RATES

        result = Resolution(zip_code=target_zip, outcome=outcome, rating_area=area, rate=rate)

    log_resolution(
        resolution_logger,
        zip_code=target_zip,
        outcome=result.outcome.value,
        rating_area=str(result.rating_area) if result.rating_area else None,
        rate=str(result.rate) if result.rate is not None else None,
        context={"candidate_areas": sorted(str(a) for a in areas)} if len(areas) > 1 else None
    )
    return result


def resolve_all(
    targets: Iterable[TargetZip],
    zip_index: ZipIndex,
    rate_index: RateIndex,
    workers: int = 1,
) -> list[Resolution]:
    """
    Resolve every target ZIP, preserving input order.

    Args:
        targets: Target ZIPs in output order
        zip_index: ZIP -> rating areas index
        rate_index: Rating area -> rates index
        workers: Thread pool size; 1 resolves sequentially

    Returns:
        One Resolution per target, in the same order
    """
    zip_codes = [target.zip_code for target in targets]

    if workers <= 1 or len(zip_codes) < 2:
        return [resolve(zip_code, zip_index, rate_index) for zip_code in zip_codes]

    # Executor.map yields results in submission order
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda z: resolve(z, zip_index, rate_index), zip_codes))


def render_lines(
    resolutions: Sequence[Resolution],
    header: str = DEFAULT_HEADER,
    strict_legacy_format: bool = True,
    places: int = 2,
) -> list[str]:
    """Header line followed by one line per resolution."""
    lines = [header]
    lines.extend(
        format_line(r.zip_code, format_rate(r.rate, places), strict_legacy_format)
        for r in resolutions
    )
    return lines
