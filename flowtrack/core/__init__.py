"""Core infrastructure: logging, auth and database access."""
