"""Project API service."""
