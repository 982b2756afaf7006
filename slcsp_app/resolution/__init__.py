"""Second lowest Silver rate resolution per target ZIP."""

from .models import Resolution, ResolutionOutcome
from .resolver import (
    format_line,
    format_rate,
    render_lines,
    resolve,
    resolve_all,
    second_lowest_rate,
)

__all__ = [
    "Resolution",
    "ResolutionOutcome",
    "format_line",
    "format_rate",
    "render_lines",
    "resolve",
    "resolve_all",
    "second_lowest_rate",
]
