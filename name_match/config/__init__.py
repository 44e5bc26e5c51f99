"""Configuration models and loading for name matching."""
