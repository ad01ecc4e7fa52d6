"""Testing support – in-memory doubles for the client's ports."""

from phlag_client.testing.fakes import FakeClock, FakeFlagTransport, FrozenClock

__all__ = ["FakeClock", "FakeFlagTransport", "FrozenClock"]
