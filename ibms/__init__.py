"""IBMS client core — tenant-scoped API access, query caching and settings."""
