"""GraphQL service that stores Contact records (JSON files, SQL or memory)."""

__version__ = "0.1.0"
