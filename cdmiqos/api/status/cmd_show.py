"""Show object status command."""

from collections.abc import Iterator

from ..backend.BackendError import BackendError
from ..StageResult import StageResult
from . import StatusShowOutput


def cmd_show(path: str) -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..backend.Backend import Backend
        from ..config.QosConfig import QosConfig

        yield (0.3, "Loading configuration...")
        try:
            config = QosConfig.load()
            yield (0.6, "Reading object status...")
            with Backend.from_config(config) as backend:
                status = backend.get_status(path)
        except BackendError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Status unavailable: {e}"
            result_obj.output = StatusShowOutput(errors=[str(e)], warnings=[], path=path, status={}).model_dump(
                mode="python"
            )
            result_obj.success = False
            return

        yield (1.0, "Complete")
        if status.in_transition:
            result_obj.result = (
                f"{path} in transition from {status.current_capability_uri} to {status.target_capability_uri}"
            )
        else:
            result_obj.result = f"{path} has capability {status.current_capability_uri}"
        result_obj.output = StatusShowOutput(
            errors=[], warnings=[], path=path, status=status.to_dict()
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Getting status of {path}...",
        progress_callback=do_work,
    )
