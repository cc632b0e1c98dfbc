"""QoS transition state machine.

An object is STABLE on one capability class until an allowed transition is
requested. It is then TRANSITIONING (target set) until the delay elapses and
the completion promotes the target to current. Requests against a
transitioning object are no-ops, and accepted transitions always complete.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from ..backend.BackendError import DeniedError
from ..capability.CapabilityCatalog import CapabilityCatalog
from ..capability.CapabilityResolver import CapabilityResolver
from ..status.association_time import association_time
from ..status.ObjectStatus import ObjectStatus
from ..status.StatusRegistry import ASSOCIATION_TIME_KEY, StatusRegistry
from .TimerScheduler import TimerScheduler
from .TransitionContext import TransitionContext

logger = logging.getLogger(__name__)

TARGET_KEY = "cdmi_capabilities_target"
POLLING_INTERVAL_KEY = "cdmi_recommended_polling_interval"

DEFAULT_TRANSITION_DELAY_SECS = 10.0
DEFAULT_POLLING_INTERVAL_MS = 10000


class TransitionScheduler:
    """Starts QoS transitions and completes them after a fixed delay."""

    def __init__(
        self,
        catalog: CapabilityCatalog,
        registry: StatusRegistry,
        resolver: CapabilityResolver,
        timer: TimerScheduler,
        delay_secs: float = DEFAULT_TRANSITION_DELAY_SECS,
        polling_interval_ms: int = DEFAULT_POLLING_INTERVAL_MS,
        clock: Callable[[], datetime] | None = None,
    ):
        self._catalog = catalog
        self._registry = registry
        self._resolver = resolver
        self._timer = timer
        self.delay_secs = delay_secs
        self.polling_interval_ms = polling_interval_ms
        self._clock = clock

    def request_transition(self, path: str, target_capability_uri: str) -> ObjectStatus:
        """Move ``path`` towards ``target_capability_uri``.

        Returns:
            The status stored after the request.

        Raises:
            NotFoundError: If the path does not exist.
            DeniedError: If the policy does not allow the target.
        """
        key = self._registry.key(path)
        with self._registry.lock(key):
            status = self._registry.get_status(key)

            decision = self._resolver.decide(key, target_capability_uri)
            if not decision.allowed:
                raise DeniedError(path, target_capability_uri, decision)

            if status.in_transition:
                logger.debug("object %s already in transition to %s", key, status.target_capability_uri)
                return status

            logger.debug("current object status %s", status)
            current_uri = status.current_capability_uri
            logger.debug("Simulate QoS transition for %s from %s to %s", key, current_uri, target_capability_uri)

            metadata = self._catalog.monitored_attributes(current_uri)
            metadata[TARGET_KEY] = target_capability_uri
            metadata[POLLING_INTERVAL_KEY] = str(self.polling_interval_ms)

            transitioning = ObjectStatus(
                current_capability_uri=current_uri,
                target_capability_uri=target_capability_uri,
                metadata=metadata,
                export_attributes=status.export_attributes,
                children=status.children,
            )
            self._registry.put(key, transitioning)

            context = TransitionContext(
                path=key,
                source_capability_uri=current_uri,
                target_capability_uri=target_capability_uri,
            )
            self._timer.schedule(self.delay_secs, self.complete_transition, context)
            return transitioning

    def resume_pending(self) -> int:
        """Schedule completion for stored records left in transition by an earlier run.

        Returns:
            Number of transitions scheduled.
        """
        pending = self._registry.pending()
        for key, status in pending:
            logger.info("Resuming QoS transition for %s to %s", key, status.target_capability_uri)
            context = TransitionContext(
                path=key,
                source_capability_uri=status.current_capability_uri,
                target_capability_uri=status.target_capability_uri,  # type: ignore[arg-type]
            )
            self._timer.schedule(self.delay_secs, self.complete_transition, context)
        return len(pending)

    def complete_transition(self, context: TransitionContext) -> ObjectStatus:
        """Promote the target class of ``context`` to current."""
        logger.debug(
            "Simulated QoS transition for %s from %s to %s finished",
            context.path,
            context.source_capability_uri,
            context.target_capability_uri,
        )

        def promote(stored: ObjectStatus | None) -> ObjectStatus:
            metadata = self._catalog.monitored_attributes(context.target_capability_uri)
            metadata[ASSOCIATION_TIME_KEY] = association_time(self._clock() if self._clock else None)
            return ObjectStatus(
                current_capability_uri=context.target_capability_uri,
                metadata=metadata,
                export_attributes=stored.export_attributes if stored else None,
                children=stored.children if stored else None,
            )

        return self._registry.update(context.path, promote)
