"""Kernel time – Clock port + implementations."""
from phlag_client.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
