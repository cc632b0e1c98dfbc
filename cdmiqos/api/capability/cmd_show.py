"""Show a CDMI capability object command."""

from collections.abc import Iterator

from ..backend.BackendError import BackendError
from ..StageResult import StageResult
from . import CapabilityShowOutput
from .build_capability_tree import build_capability_tree


def cmd_show(uri: str = "/cdmi_capabilities/") -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..backend.Backend import Backend
        from ..config.QosConfig import QosConfig

        yield (0.3, "Loading configuration...")
        try:
            config = QosConfig.load()
            yield (0.6, "Building capability tree...")
            with Backend.from_config(config) as backend:
                tree = build_capability_tree(backend.get_capabilities())
        except BackendError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to load capabilities: {e}"
            result_obj.output = CapabilityShowOutput(
                errors=[str(e)], warnings=[], uri=uri, capability={}
            ).model_dump(mode="python")
            result_obj.success = False
            return

        # Type nodes are addressed with a trailing slash, class nodes without
        capability = tree.get(uri) or tree.get(uri.rstrip("/")) or tree.get(uri.rstrip("/") + "/")
        yield (1.0, "Complete")
        if capability is None:
            result_obj.result = f"Capability not found: {uri}"
            result_obj.output = CapabilityShowOutput(
                errors=[f"Capability not found: {uri}"], warnings=[], uri=uri, capability={}
            ).model_dump(mode="python")
            result_obj.success = False
            return

        result_obj.result = f"Capability {capability['objectName']}"
        result_obj.output = CapabilityShowOutput(
            errors=[], warnings=[], uri=uri, capability=capability
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Showing capability {uri}...",
        progress_callback=do_work,
    )
