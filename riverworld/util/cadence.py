"""Fixed-interval cadence accumulators.

Several rules run once per simulated second regardless of how many frames
that second spans. A Cadence accumulates scaled frame deltas and reports how
many whole intervals have elapsed, carrying the remainder forward.
"""


class Cadence:
    """Accumulates elapsed time and fires once per whole interval."""

    __slots__ = ("interval", "accumulated")

    def __init__(self, interval: float = 1.0, accumulated: float = 0.0) -> None:
        if interval <= 0:
            raise ValueError(f"Cadence interval must be positive, got {interval}")
        self.interval = interval
        self.accumulated = accumulated

    def tick(self, delta: float) -> int:
        """Add ``delta`` seconds and return how many intervals completed."""
        self.accumulated += max(0.0, delta)
        if self.accumulated < self.interval:
            return 0
        fired = int(self.accumulated // self.interval)
        self.accumulated -= fired * self.interval
        return fired

    def reset(self) -> None:
        self.accumulated = 0.0

    def __repr__(self) -> str:
        return f"Cadence(interval={self.interval}, accumulated={self.accumulated:.3f})"
