"""Chat-style capture of expenses, reminders, tasks and notes."""

__version__ = "0.1.0"
