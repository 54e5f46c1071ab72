"""Runtime services shared by the buffer layer."""

from . import telemetry

__all__ = ["telemetry"]
