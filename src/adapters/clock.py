"""System clock adapter - Implements Clock protocol."""

import time


class SystemClock:
    """Returns wall-clock time in epoch milliseconds."""

    def now(self) -> int:
        return time.time_ns() // 1_000_000
