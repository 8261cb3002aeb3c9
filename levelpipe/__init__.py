"""Application context, directory layout, pattern matching, base64, SQLite and file output."""

__version__ = "1.0.0"
__all__ = [
    "context",
    "dbinterface",
    "directories",
    "encoding",
    "filewriter",
    "matchable",
    "systemutils",
]