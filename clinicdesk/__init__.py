"""Patient records, appointment booking and reports for a small clinic, kept in a JSON file."""

__version__ = "0.1.0"
__all__ = ["models", "clinic", "reports", "cli"]