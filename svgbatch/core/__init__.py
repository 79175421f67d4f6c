"""Core models and errors."""
