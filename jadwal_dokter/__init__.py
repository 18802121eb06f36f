"""Doctor shift scheduling over a 30-day month, with roster editing and CSV export."""

__version__ = "1.0.0"