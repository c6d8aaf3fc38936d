# Ports layer - Abstract interfaces (Protocols)

from .diagnostics import DiagnosticsSink

__all__ = ["DiagnosticsSink"]
