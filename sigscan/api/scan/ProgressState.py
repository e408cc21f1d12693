"""Progress counters shared between a scan and its observers."""

import threading


class ProgressState:
    """Discovered/completed file counters for one scan.

    Both counters only grow while a scan runs. Readers may poll from any
    thread and must tolerate ``completed < discovered`` mid-scan.
    """

    def __init__(self) -> None:
        self._discovered = 0
        self._completed = 0
        self._lock = threading.Lock()

    @property
    def discovered(self) -> int:
        return self._discovered

    @property
    def completed(self) -> int:
        return self._completed

    def add_discovered(self, count: int = 1) -> None:
        with self._lock:
            self._discovered += count

    def add_completed(self, count: int = 1) -> None:
        with self._lock:
            self._completed += count

    def snapshot(self) -> tuple[int, int]:
        """Return ``(discovered, completed)`` read together."""
        with self._lock:
            return self._discovered, self._completed

    def reset(self) -> None:
        with self._lock:
            self._discovered = 0
            self._completed = 0

    def __repr__(self) -> str:
        discovered, completed = self.snapshot()
        return f"ProgressState(discovered={discovered}, completed={completed})"
