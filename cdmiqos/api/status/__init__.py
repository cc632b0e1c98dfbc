"""Status API module."""

from .._output_schemas.status import StatusShowOutput

__all__ = ["StatusShowOutput"]
