"""Show configuration command."""

from collections.abc import Iterator

from ..backend.BackendError import ConfigurationError
from ..StageResult import StageResult
from . import ConfigShowOutput
from .QosConfig import QosConfig


def cmd_show() -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = str(QosConfig.get_config_path())
        yield (0.5, "Loading configuration...")
        try:
            config = QosConfig.load()
        except ConfigurationError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = ConfigShowOutput(
                errors=[str(e)], warnings=[], config_path=config_path, content={}
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Configuration loaded from {config_path}"
        result_obj.output = ConfigShowOutput(
            errors=[], warnings=[], config_path=config_path, content=config.to_dict()
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Showing configuration...",
        progress_callback=do_work,
    )
