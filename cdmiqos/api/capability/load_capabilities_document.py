"""Read the capability configuration document."""

import json
from importlib import resources
from pathlib import Path
from typing import Any

from ..backend.BackendError import ConfigurationError

DEFAULT_RESOURCE = "filesystem-capabilities.json"


def load_capabilities_document(path: str | Path | None = None) -> dict[str, Any]:
    """Load the capability document from ``path`` or the packaged default.

    Raises:
        ConfigurationError: If the file is missing or is not a JSON object.
    """
    try:
        if path is None:
            text = resources.files("cdmiqos.res").joinpath(DEFAULT_RESOURCE).read_text()
            source = f"cdmiqos.res/{DEFAULT_RESOURCE}"
        else:
            source_path = Path(path).expanduser()
            text = source_path.read_text()
            source = str(source_path)
    except OSError as e:
        raise ConfigurationError(f"Cannot read capabilities document: {e}") from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in capabilities document {source}: {e}") from e
    if not isinstance(document, dict):
        raise ConfigurationError(f"Capabilities document {source} must be a JSON object")
    return document
