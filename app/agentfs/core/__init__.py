"""Configuration and application paths."""
