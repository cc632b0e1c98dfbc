"""CDMI QoS capability and transition engine."""

__version__ = "0.3.0"
