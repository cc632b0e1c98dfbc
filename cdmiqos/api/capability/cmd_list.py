"""List capability classes command."""

from collections.abc import Iterator

from ..backend.BackendError import BackendError
from ..StageResult import StageResult
from . import CapabilityListOutput


def cmd_list() -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        from ..backend.Backend import Backend
        from ..config.QosConfig import QosConfig

        yield (0.3, "Loading configuration...")
        try:
            config = QosConfig.load()
            yield (0.6, "Loading capability classes...")
            with Backend.from_config(config) as backend:
                capabilities = [c.to_dict() for c in backend.get_capabilities()]
        except BackendError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to list capabilities: {e}"
            result_obj.output = CapabilityListOutput(
                errors=[str(e)],
                warnings=[],
                capabilities=[],
                count=0,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(capabilities)} capability class(es)"
        result_obj.output = CapabilityListOutput(
            errors=[],
            warnings=[],
            capabilities=capabilities,
            count=len(capabilities),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing capability classes...",
        progress_callback=do_work,
    )
