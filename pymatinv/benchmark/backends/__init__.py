"""Benchmark backends."""

from pymatinv.benchmark.backends.cpu import CPUSingleThreadBackend, CPUThreadedBackend

__all__ = ["CPUSingleThreadBackend", "CPUThreadedBackend"]
