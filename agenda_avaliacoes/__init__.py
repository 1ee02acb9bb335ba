"""Academic assessment schedule: store activities in SQLite, list them by date and render HTML."""

__version__ = "2026.4.24.0"