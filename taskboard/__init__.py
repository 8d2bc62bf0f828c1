"""A prioritised task list kept in a local SQLite database, with a command line."""

__version__ = "0.1.0"