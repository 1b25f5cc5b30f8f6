"""File writers for generated records."""

from lazyproduct.sinks.writers import write_csv, write_jsonl

__all__ = ["write_jsonl", "write_csv"]
