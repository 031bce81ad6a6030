"""
Benchmark suite for tagjson parsing performance.

Compares tagjson against established JSON libraries:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Run with ``pytest benchmarks`` after installing the ``bench`` extra.
"""
