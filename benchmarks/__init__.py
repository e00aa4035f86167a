"""Performance benchmarks for sigmat.

Microbenchmarks for the signal-processing hot paths (filter, conv).
"""
