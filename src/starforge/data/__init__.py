"""Static lookup data."""
