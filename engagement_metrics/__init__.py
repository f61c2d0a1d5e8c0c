"""Custom engagement metrics publishing for the monitoring backend."""

__version__ = "0.1.0"
