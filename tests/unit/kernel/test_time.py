"""Unit tests for kernel time utilities."""

from __future__ import annotations

from datetime import UTC, datetime

from phlag_client.kernel.time import Clock, FrozenClock, SystemClock


class TestSystemClock:
    def test_now_returns_utc_aware_datetime(self) -> None:
        result = SystemClock().now()
        assert result.tzinfo is not None
        assert result.utcoffset().total_seconds() == 0  # type: ignore[union-attr]

    def test_timestamp_close_to_now(self) -> None:
        expected = datetime.now(UTC).timestamp()
        assert abs(SystemClock().timestamp() - expected) < 1.0


class TestFrozenClock:
    def _fixed(self) -> datetime:
        return datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)

    def test_now_is_fixed(self) -> None:
        clk = FrozenClock(self._fixed())
        assert clk.now() == self._fixed()
        assert clk.now() == clk.now()

    def test_timestamp_matches_fixed(self) -> None:
        assert FrozenClock(self._fixed()).timestamp() == self._fixed().timestamp()

    def test_advance_seconds(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.advance(seconds=61)
        assert clk.timestamp() - self._fixed().timestamp() == 61

    def test_satisfies_clock_protocol(self) -> None:
        clk: Clock = FrozenClock(self._fixed())
        assert clk.timestamp() > 0
