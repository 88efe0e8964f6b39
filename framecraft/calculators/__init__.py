"""
Framing cost calculators.

Pure Python math, no I/O. Each stage is a plain function:
dimensions → markup → components → totals → breakdown.
"""
