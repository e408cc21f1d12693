"""Background scan and removal with pollable state."""

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from ..config.ScanConfig import ScanConfig
from .ProgressState import ProgressState
from .RemediationError import RemediationError
from .remove_files import remove_files
from .scan import scan
from .ScanError import ScanError

logger = logging.getLogger(__name__)


class ScanSession:
    """Runs one scan or removal at a time on a background thread.

    A front end starts work with ``start_scan`` or ``start_remove`` and then
    polls ``progress`` and ``done``. Once ``done`` is set it checks ``error``
    first and, if that is None, reads ``matches`` (after a scan) or
    ``removed`` (after a removal).
    """

    def __init__(self, config: ScanConfig | None = None) -> None:
        self.config = config or ScanConfig()
        self.progress = ProgressState()
        self.error: ScanError | None = None
        self.matches: Mapping[str, Path] = MappingProxyType({})
        self.removed: list[Path] = []
        self._done = threading.Event()
        self._thread: threading.Thread | None = None
        self._running = False
        self._lock = threading.Lock()

    @property
    def done(self) -> bool:
        return self._done.is_set()

    @property
    def busy(self) -> bool:
        return self._running

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the running operation finishes; False on timeout."""
        return self._done.wait(timeout)

    def start_scan(self, root: Path | str) -> None:
        """Start scanning ``root``; clears the previous result and error.

        Raises:
            RuntimeError: If a scan or removal is still running
        """
        with self._lock:
            self._ensure_idle()
            self.error = None
            self.matches = MappingProxyType({})
            self.removed = []
            self.progress.reset()
            self._start(self._run_scan, Path(root), name="sigscan-scan")

    def start_remove(self, paths: Iterable[Path] | None = None) -> None:
        """Start deleting ``paths``, by default every path in ``matches``.

        Raises:
            RuntimeError: If a scan or removal is still running
        """
        with self._lock:
            self._ensure_idle()
            targets = [Path(p) for p in (self.matches.values() if paths is None else paths)]
            self.error = None
            self.removed = []
            self._start(self._run_remove, targets, name="sigscan-remove")

    def _ensure_idle(self) -> None:
        if self.busy:
            raise RuntimeError("A scan or removal is already running")

    def _start(self, target: Callable, arg: object, name: str) -> None:
        self._done.clear()
        self._running = True
        thread = threading.Thread(target=target, args=(arg,), name=name, daemon=True)
        self._thread = thread
        thread.start()

    def _run_scan(self, root: Path) -> None:
        try:
            outcome = scan(root, progress=self.progress, config=self.config)
            if outcome.error is not None:
                self.error = outcome.error
            else:
                self.matches = outcome.matches or MappingProxyType({})
        except Exception as exc:
            logger.exception(f"Unexpected failure scanning {root}")
            self.error = ScanError(f"Unexpected failure scanning {root}: {exc}")
        finally:
            self._finish()

    def _run_remove(self, paths: list[Path]) -> None:
        try:
            self.removed = remove_files(paths)
        except RemediationError as exc:
            self.removed = exc.removed
            self.error = exc
        except Exception as exc:
            logger.exception("Unexpected failure removing files")
            self.error = ScanError(f"Unexpected failure removing files: {exc}")
        finally:
            self._finish()

    def _finish(self) -> None:
        # done must be set before the session reads as idle to a new start_*
        with self._lock:
            self._done.set()
            self._running = False
