"""Configuration, logging, errors and SQLite plumbing."""
