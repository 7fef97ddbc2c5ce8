"""Configuration, logging and message strings."""
