"""Kernel time – Clock port + implementations."""
from feature_manifest.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
