"""Student records kept in SQLite: profiles, courses, attendance and progress."""

__version__ = "0.1.0"

__all__ = ["attendance", "cli", "courses", "database", "progress", "students"]