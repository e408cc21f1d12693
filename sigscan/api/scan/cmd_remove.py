"""Remove API function.

Deletes the given files, skipping any that are already gone.
Matches CLI: sigscan remove PATH...
"""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.scan import RemoveOutput
from ..StageResult import StageResult
from .RemediationError import RemediationError
from .remove_files import remove_files


def cmd_remove(paths: list[str]) -> StageResult:
    """Delete files previously reported as matches.

    Args:
        paths: Files to delete

    Returns:
        StageResult with requested and removed paths
    """
    targets = [Path(p).expanduser().absolute() for p in paths]

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, f"Removing {len(targets)} file(s)...")
        errors: list[str] = []
        try:
            removed = remove_files(targets)
        except RemediationError as exc:
            removed = exc.removed
            errors.append(str(exc))
        yield (1.0, "Complete")

        success = not errors
        if success:
            skipped = len(targets) - len(removed)
            message = f"Removed {len(removed)} file(s)"
            if skipped:
                message += f", {skipped} already gone"
        else:
            message = errors[0]

        result_obj.output = RemoveOutput(
            errors=errors,
            warnings=[],
            requested=[str(p) for p in targets],
            removed=[str(p) for p in removed],
            success=success,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = success

    return StageResult(
        announce=f"Removing {len(targets)} file(s)...",
        progress_callback=do_work,
    )
