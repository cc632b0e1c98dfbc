"""Unit tests for cdmiqos.api.transition.TransitionScheduler module."""

import threading

import pytest

from cdmiqos.api.backend.Backend import Backend
from cdmiqos.api.backend.BackendConfig import BackendConfig
from cdmiqos.api.backend.BackendError import DeniedError, NotFoundError
from cdmiqos.api.capability.CapabilityCatalog import CapabilityCatalog
from cdmiqos.api.capability.CapabilityResolver import CapabilityResolver
from cdmiqos.api.capability.TransitionDecision import TransitionDecision
from cdmiqos.api.status.FilesystemStorage import FilesystemStorage
from cdmiqos.api.status.StatusRegistry import ASSOCIATION_TIME_KEY, StatusRegistry
from cdmiqos.api.status.StoreConfig import StoreConfig
from cdmiqos.api.transition.TransitionContext import TransitionContext
from cdmiqos.api.transition.TransitionScheduler import POLLING_INTERVAL_KEY, TARGET_KEY, TransitionScheduler
from tests.conftest import BRONZE, FAST, GOLD, SILVER, SLOW, FakeClock, backend_config_dict


@pytest.fixture
def slow_backend(base_dir, capabilities_file):
    config = BackendConfig(**backend_config_dict(base_dir, capabilities_file, delay=0.5))
    with Backend(config, clock=FakeClock()) as backend:
        yield backend
        backend.wait_for_transitions(timeout=5)


def test_request_marks_transition(backend):
    status = backend.request_transition("d", BRONZE)
    assert status.current_capability_uri == GOLD
    assert status.target_capability_uri == BRONZE
    assert status.metadata[TARGET_KEY] == BRONZE
    assert status.metadata[POLLING_INTERVAL_KEY] == "10000"
    assert status.metadata["cdmi_latency_provided"] == "100"
    assert ASSOCIATION_TIME_KEY not in status.metadata
    assert status.children == ["a.txt", "b.txt"]
    assert status.export_attributes is not None


def test_transition_completes_after_delay(backend):
    before = backend.get_status("d")
    assert before.metadata[ASSOCIATION_TIME_KEY] == "2024-01-01T12:00Z"

    backend.request_transition("d", BRONZE)
    assert backend.wait_for_transitions(timeout=5)

    after = backend.get_status("d")
    assert after.current_capability_uri == BRONZE
    assert not after.in_transition
    assert after.metadata == {
        "cdmi_latency_provided": "20000",
        "cdmi_data_redundancy_provided": "1",
        "cdmi_capabilities_allowed_provided": [GOLD],
        ASSOCIATION_TIME_KEY: "2024-01-01T13:00Z",
    }
    assert after.children == ["a.txt", "b.txt"]
    assert after.export_attributes == before.export_attributes


def test_transition_back_after_completion(backend):
    backend.request_transition("d", BRONZE)
    assert backend.wait_for_transitions(timeout=5)
    backend.request_transition("d", GOLD)
    assert backend.wait_for_transitions(timeout=5)
    status = backend.get_status("d")
    assert status.current_capability_uri == GOLD
    assert status.metadata[ASSOCIATION_TIME_KEY] == "2024-01-01T14:00Z"


def test_file_transition(backend):
    backend.request_transition("/d/a.txt", SLOW)
    assert backend.wait_for_transitions(timeout=5)
    assert backend.get_status("/d/a.txt").current_capability_uri == SLOW
    assert backend.get_status("/d/b.txt").current_capability_uri == FAST


def test_denied_leaves_state_unchanged(backend):
    before = backend.get_status("d")
    with pytest.raises(DeniedError) as exc_info:
        backend.request_transition("d", "/cdmi_capabilities/container/platinum")
    assert exc_info.value.decision is TransitionDecision.DENIED
    assert backend.get_status("d") == before
    assert backend.impl.timer.pending() == 0


def test_self_transition_denied(backend):
    with pytest.raises(DeniedError):
        backend.request_transition("d", GOLD)


def test_missing_path_not_found(backend):
    with pytest.raises(NotFoundError):
        backend.request_transition("missing", BRONZE)


def test_second_request_while_pending_is_noop(slow_backend):
    first = slow_backend.request_transition("d", BRONZE)
    second = slow_backend.request_transition("d", BRONZE)
    assert second == first
    assert slow_backend.impl.timer.pending() == 1


def test_denied_request_while_pending_still_raises(slow_backend):
    slow_backend.request_transition("d", BRONZE)
    with pytest.raises(DeniedError):
        slow_backend.request_transition("d", SILVER)
    assert slow_backend.get_status("d").target_capability_uri == BRONZE


def test_status_reads_during_transition(slow_backend):
    slow_backend.request_transition("d", BRONZE)
    status = slow_backend.get_status("d")
    assert status.in_transition
    assert status.current_capability_uri == GOLD
    assert slow_backend.wait_for_transitions(timeout=5)
    assert slow_backend.get_status("d").current_capability_uri == BRONZE


def test_concurrent_requests_schedule_one_transition(slow_backend):
    barrier = threading.Barrier(16)
    results = []
    errors = []

    def request():
        barrier.wait()
        try:
            results.append(slow_backend.request_transition("d", BRONZE))
        except Exception as e:  # pragma: no cover - surfaced by the assertion below
            errors.append(e)

    threads = [threading.Thread(target=request) for _ in range(16)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(results) == 16
    assert all(result == results[0] for result in results)
    assert slow_backend.impl.timer.pending() == 1
    assert slow_backend.wait_for_transitions(timeout=5)
    assert slow_backend.get_status("d").current_capability_uri == BRONZE


def test_complete_transition_for_removed_object(backend, base_dir):
    backend.get_status("f.txt")
    (base_dir / "f.txt").unlink()
    context = TransitionContext(path="f.txt", source_capability_uri=FAST, target_capability_uri=SLOW)
    status = backend.impl.scheduler.complete_transition(context)
    assert status.current_capability_uri == SLOW
    with pytest.raises(NotFoundError):
        backend.get_status("f.txt")


class RecordingTimer:
    def __init__(self):
        self.scheduled = []

    def schedule(self, delay_secs, task, context):
        self.scheduled.append((delay_secs, task, context))


def test_default_delay_and_polling_interval(capabilities_document, base_dir):
    catalog = CapabilityCatalog.load(capabilities_document)
    store = StoreConfig(type="memory", data={}).create_store()
    registry = StatusRegistry(catalog, FilesystemStorage(base_dir), store, startup_time="2024-01-01T12:00Z")
    timer = RecordingTimer()
    scheduler = TransitionScheduler(catalog, registry, CapabilityResolver(catalog, registry), timer)  # type: ignore[arg-type]

    status = scheduler.request_transition("d", BRONZE)

    assert status.metadata[POLLING_INTERVAL_KEY] == "10000"
    [(delay_secs, task, context)] = timer.scheduled
    assert delay_secs == 10.0
    assert context == TransitionContext(path="/d", source_capability_uri=GOLD, target_capability_uri=BRONZE)
    task(context)
    assert registry.get_status("d").current_capability_uri == BRONZE


def test_default_config_values(base_dir):
    data = BackendConfig(type="filesystem", data={"baseDirectory": str(base_dir)}).data
    assert data.transition_delay_secs == 10.0  # type: ignore[attr-defined]
    assert data.polling_interval_ms == 10000  # type: ignore[attr-defined]


def test_aliased_paths_share_one_transition(slow_backend):
    slow_backend.request_transition("/d", BRONZE)
    status = slow_backend.get_status("d")
    assert status.target_capability_uri == BRONZE

    slow_backend.request_transition("d", BRONZE)
    slow_backend.request_transition("./d/", BRONZE)
    assert slow_backend.impl.timer.pending() == 1
    assert slow_backend.wait_for_transitions(timeout=5)
    assert slow_backend.get_status("/d").current_capability_uri == BRONZE
