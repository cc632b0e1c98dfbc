"""Backend API module."""
