"""
Input ingestion module.

Reads the plans, zips and target tables and converts their rows into
immutable records for the indices and the resolver.
"""
