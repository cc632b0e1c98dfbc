"""Request a QoS transition command."""

from collections.abc import Iterator

from ..backend.BackendError import BackendError, DeniedError
from ..StageResult import StageResult
from . import TransitionRequestOutput


def cmd_request(path: str, target: str, wait: bool = False, timeout: float | None = None) -> StageResult:
    """Request that ``path`` move to capability ``target``.

    With ``wait`` the command blocks until the transition completes (or
    ``timeout`` seconds pass) and reports the final status. Without it the
    accepted status is reported; closing the backend still lets the
    transition finish before the command returns.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..backend.Backend import Backend
        from ..config.QosConfig import QosConfig

        def fail(message: str, error: Exception, accepted: bool = False) -> None:
            result_obj.result = message
            result_obj.output = TransitionRequestOutput(
                errors=[str(error)],
                warnings=[],
                path=path,
                target_capability_uri=target,
                accepted=accepted,
                completed=False,
                status={},
            ).model_dump(mode="python")
            result_obj.success = False

        yield (0.2, "Loading configuration...")
        try:
            config = QosConfig.load()
            backend = Backend.from_config(config)
        except BackendError as e:
            yield (1.0, "Complete")
            fail(f"Backend unavailable: {e}", e)
            return

        with backend:
            yield (0.4, "Requesting transition...")
            try:
                status = backend.request_transition(path, target)
            except DeniedError as e:
                yield (1.0, "Complete")
                fail(f"Transition denied: {e}", e)
                return
            except BackendError as e:
                yield (1.0, "Complete")
                fail(f"Transition failed: {e}", e)
                return

            warnings: list[str] = []
            if status.target_capability_uri != target:
                warnings.append(f"{path} already in transition to {status.target_capability_uri}")

            completed = False
            if wait:
                yield (0.6, "Waiting for transition to complete...")
                completed = backend.wait_for_transitions(timeout)
                if not completed:
                    warnings.append(f"Transition still pending after {timeout}s")
                status = backend.get_status(path)

        yield (1.0, "Complete")
        result_obj.result = (
            f"{path} now has capability {status.current_capability_uri}"
            if completed
            else f"Transition of {path} to {target} accepted"
        )
        result_obj.output = TransitionRequestOutput(
            errors=[],
            warnings=warnings,
            path=path,
            target_capability_uri=target,
            accepted=True,
            completed=completed,
            status=status.to_dict(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Requesting transition of {path} to {target}...",
        progress_callback=do_work,
    )
