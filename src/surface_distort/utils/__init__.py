"""Helper routines."""

from .log import configure_logging  # noqa: F401
