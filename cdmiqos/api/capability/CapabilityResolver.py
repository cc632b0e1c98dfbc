"""Capability resolver: decides whether a QoS transition is permitted."""

import logging
from typing import TYPE_CHECKING

from ..backend.BackendError import BackendError
from .CapabilityCatalog import CapabilityCatalog
from .CapabilityUri import CapabilityUri
from .TransitionDecision import TransitionDecision

if TYPE_CHECKING:
    from ..status.StatusRegistry import StatusRegistry

logger = logging.getLogger(__name__)


class CapabilityResolver:
    """Checks a target capability against the allow-list of an object's current class."""

    def __init__(self, catalog: CapabilityCatalog, registry: "StatusRegistry"):
        self._catalog = catalog
        self._registry = registry

    def decide(self, path: str, target_capability_uri: str) -> TransitionDecision:
        """Decide whether ``path`` may move to ``target_capability_uri``.

        Never raises; failed lookups come back as INDETERMINATE.
        """
        decision = self._decide(path, target_capability_uri)
        if not decision.allowed:
            logger.warning("target capabilities URI not supported %s (%s)", target_capability_uri, decision.value)
        return decision

    def is_transition_allowed(self, path: str, target_capability_uri: str) -> bool:
        return self.decide(path, target_capability_uri).allowed

    def _decide(self, path: str, target_capability_uri: str) -> TransitionDecision:
        try:
            status = self._registry.get_status(path)
        except BackendError as e:
            logger.warning("Could not get status for %s: %s", path, e)
            return TransitionDecision.INDETERMINATE

        current_uri = status.current_capability_uri
        try:
            current = CapabilityUri.parse(current_uri)
        except ValueError as e:
            logger.warning("Could not parse current capabilities of %s: %s", path, e)
            return TransitionDecision.INDETERMINATE

        current_class = self._catalog.find(current.value)
        if current_class is None:
            logger.warning("Could not get capabilities for %s", current_uri)
            return TransitionDecision.INDETERMINATE

        if target_capability_uri == current_uri:
            return TransitionDecision.DENIED

        allowed_targets = current_class.allowed_targets
        if allowed_targets is None:
            return TransitionDecision.DENIED
        if not isinstance(allowed_targets, (list, tuple)):
            logger.warning("Malformed allow-list in %s: %r", current_uri, allowed_targets)
            return TransitionDecision.INDETERMINATE

        if any(str(entry) == target_capability_uri for entry in allowed_targets):
            return TransitionDecision.ALLOWED
        return TransitionDecision.DENIED
