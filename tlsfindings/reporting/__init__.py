from tlsfindings.reporting.types import ReportMode

__all__ = ["ReportMode"]
