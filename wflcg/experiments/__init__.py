"""Benchmark harness and result plotting."""
