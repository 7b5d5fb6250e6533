"""Performance benchmarks for firstream.

Microbenchmarks for the per-sample streaming path and filter design.
"""
