"""Configuration — the one-line project record, settings, and logging."""
