"""Infrastructure layer - logging and other side-effecting integrations."""

from .diagnostics import DiagnosticEvent, LoggingDiagnostics, RecordingDiagnostics

__all__ = [
    "DiagnosticEvent",
    "LoggingDiagnostics",
    "RecordingDiagnostics",
]
