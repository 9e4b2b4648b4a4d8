"""In-memory admin console: record-management screens over one generic engine."""

__version__ = "0.1.0"
