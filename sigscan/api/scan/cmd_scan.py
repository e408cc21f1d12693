"""Scan API function.

Scans a directory (or a launcher's data directory) for known-malicious files.
Matches CLI: sigscan scan [PATH] [--launcher NAME] [--remove]
"""

from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path

from ...constants import LAST_SCAN_STATUS_FILE, MALWARE_ADVISORY
from .._output_schemas.scan import MatchEntry, ScanOutput
from ..config.SigscanConfig import SigscanConfig
from ..config.write_status_file import write_status_file
from ..StageResult import StageResult
from .Launcher import Launcher
from .ScanSession import ScanSession


def _resolve_root(path: str | None, launcher: str | None) -> tuple[Path | None, str | None]:
    """Return (root, None) or (None, problem)."""
    if launcher is not None:
        try:
            profile = Launcher(launcher.lower())
        except ValueError:
            names = ", ".join(item.value for item in Launcher)
            return None, f"Unknown launcher {launcher!r} (expected one of: {names})"
        if profile is not Launcher.CUSTOM:
            if path is not None:
                return None, "Give either a path or a launcher, not both"
            directory = profile.data_directory()
            if directory is None:
                return None, f"Cannot locate the {profile.label} data directory on this system"
            return directory, None
    if path is None:
        return None, "A directory to scan is required"
    return Path(path).expanduser().absolute(), None


def _scan_fraction(discovered: int, completed: int) -> float:
    if discovered <= 0:
        return 0.05
    return 0.05 + 0.8 * min(completed / discovered, 1.0)


def cmd_scan(
    path: str | None = None,
    launcher: str | None = None,
    remove: bool = False,
    poll_interval: float = 0.1,
) -> StageResult:
    """Scan a directory tree for files matching known signatures.

    Args:
        path: Directory to scan (required unless a non-custom launcher is given)
        launcher: Launcher profile whose data directory is scanned
        remove: Delete matching files after the scan
        poll_interval: Seconds between progress reports

    Returns:
        StageResult with matches, counters and removed paths
    """
    root, problem = _resolve_root(path, launcher)
    target = str(root) if root is not None else (path or launcher or "")

    def _build_result(
        result_obj: StageResult,
        success: bool,
        message: str,
        discovered: int = 0,
        completed: int = 0,
        matches: list[MatchEntry] | None = None,
        removed: list[str] | None = None,
        clean: bool | None = None,
        errors: list[str] | None = None,
        warnings: list[str] | None = None,
    ) -> None:
        result_obj.output = ScanOutput(
            errors=errors or [],
            warnings=warnings or [],
            root=target,
            discovered=discovered,
            completed=completed,
            matches=matches or [],
            removed=removed or [],
            clean=clean,
            success=success,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = success

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Run the scan in the background and report its counters."""
        yield (0.0, "Loading configuration...")
        try:
            config = SigscanConfig.load()
        except ValueError as exc:
            yield (1.0, "Complete")
            _build_result(result_obj, success=False, message=str(exc), errors=[str(exc)])
            return

        if root is None:
            yield (1.0, "Complete")
            _build_result(result_obj, success=False, message=str(problem), errors=[str(problem)])
            return

        session = ScanSession(config.scan)
        session.start_scan(root)
        while not session.wait(poll_interval):
            discovered, completed = session.progress.snapshot()
            yield (_scan_fraction(discovered, completed), f"Scanning... {completed}/{discovered}")

        discovered, completed = session.progress.snapshot()
        yield (0.85, f"Hashed {completed}/{discovered} file(s)")

        warnings: list[str] = []
        if session.error is not None:
            message = f"Error scanning: {session.error}"
            _record_status(root, discovered, completed, {}, [], str(session.error), warnings)
            yield (1.0, "Complete")
            _build_result(
                result_obj,
                success=False,
                message=message,
                discovered=discovered,
                completed=completed,
                errors=[str(session.error)],
                warnings=warnings,
            )
            return

        found = dict(session.matches)
        matches = [
            MatchEntry(digest=digest, path=str(match_path))
            for digest, match_path in sorted(found.items(), key=lambda item: str(item[1]))
        ]

        removed: list[str] = []
        errors: list[str] = []
        if matches and remove:
            yield (0.9, f"Removing {len(matches)} infected file(s)...")
            session.start_remove()
            session.wait()
            removed = [str(p) for p in session.removed]
            if session.error is not None:
                errors.append(str(session.error))

        if matches:
            warnings.append(MALWARE_ADVISORY)

        _record_status(root, discovered, completed, found, removed, errors[0] if errors else None, warnings)
        yield (1.0, "Complete")

        if not matches:
            message = "Scan complete! No malicious content found"
            success = True
        elif not remove:
            message = f"Scan complete! Malware found at {len(matches)} path(s)"
            success = False
        elif errors:
            message = f"Removed {len(removed)} of {len(matches)} infected file(s): {errors[0]}"
            success = False
        else:
            message = f"Scan complete! Removed {len(removed)} infected file(s)"
            success = True

        _build_result(
            result_obj,
            success=success,
            message=message,
            discovered=discovered,
            completed=completed,
            matches=matches,
            removed=removed,
            clean=not matches,
            errors=errors,
            warnings=warnings,
        )

    return StageResult(
        announce=f"Scanning {target}...",
        progress_callback=do_work,
    )


def _record_status(
    root: Path,
    discovered: int,
    completed: int,
    matches: dict[str, Path],
    removed: list[str],
    error: str | None,
    warnings: list[str],
) -> None:
    """Write the last scan summary to the sigscan home directory."""
    status = {
        "root": str(root),
        "finished": datetime.now(timezone.utc).isoformat(),
        "discovered": discovered,
        "completed": completed,
        "matches": {digest: str(p) for digest, p in matches.items()},
        "removed": removed,
        "error": error,
    }
    try:
        write_status_file(status, sigscan_home=SigscanConfig.get_home_dir(), filename=LAST_SCAN_STATUS_FILE)
    except OSError as exc:
        warnings.append(f"Could not write scan status: {exc}")
