"""
Parsing and aggregation of time-tracking notes. Pure functions, no I/O.
"""
