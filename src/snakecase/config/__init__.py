"""Configuration: TOML discovery, settings merging, and logging setup."""
