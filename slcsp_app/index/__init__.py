"""Lookup indices built once per run from the input tables."""

from .rate_index import RateIndex
from .zip_index import ZipIndex

__all__ = [
    "RateIndex",
    "ZipIndex",
]
