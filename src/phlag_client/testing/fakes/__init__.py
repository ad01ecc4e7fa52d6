"""Testing fakes – in-memory doubles for kernel and application ports."""
from phlag_client.testing.fakes.clock import FakeClock
from phlag_client.testing.fakes.transport import FakeFlagTransport
from phlag_client.kernel.time import FrozenClock

__all__ = ["FakeClock", "FakeFlagTransport", "FrozenClock"]
