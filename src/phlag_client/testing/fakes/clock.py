"""Testing fakes – FakeClock factory."""
from __future__ import annotations

from datetime import UTC, datetime

from phlag_client.kernel.time import FrozenClock


def FakeClock() -> FrozenClock:
    """Return a ``FrozenClock`` pinned to the current wall-clock second.

    Cache files get real modification times, so the frozen clock starts
    from the present for file ages to come out right.
    """
    return FrozenClock(datetime.now(UTC).replace(microsecond=0))


__all__ = ["FakeClock"]
