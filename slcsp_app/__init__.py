"""
SLCSP App - Second Lowest Cost Silver Plan resolver

Joins a health plan rate table with a ZIP-to-rating-area table and reports,
for each requested ZIP code, the second lowest Silver plan rate of the ZIP's
rating area. ZIPs that are unknown, ambiguous or lack two distinct rates are
reported with an empty rate.
"""

__version__ = "0.1.0"
__author__ = "SLCSP Team"
