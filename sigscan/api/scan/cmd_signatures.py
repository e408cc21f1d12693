"""Signatures API function - lists the known-malicious digests."""

from collections.abc import Iterator

from .._output_schemas.scan import SignaturesOutput
from ..StageResult import StageResult
from . import signatures


def cmd_signatures() -> StageResult:
    """List the SHA-1 signatures files are matched against."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Reading signature set...")
        digests = sorted(signatures.INFECTED_HASHES)
        yield (1.0, "Complete")
        result_obj.output = SignaturesOutput(
            errors=[],
            warnings=[],
            signatures=digests,
            count=len(digests),
        ).model_dump(mode="python")
        result_obj.result = f"{len(digests)} known signature(s)"
        result_obj.success = True

    return StageResult(
        announce="Listing known signatures...",
        progress_callback=do_work,
    )
