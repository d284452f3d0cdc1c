"""Configuration: TOML discovery, settings, logging."""
