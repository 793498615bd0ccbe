"""Store inventory keeping with SQLite storage, low-stock alerts and user roles."""

__version__ = "1.0.0"