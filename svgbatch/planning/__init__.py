"""Input discovery and job planning."""
