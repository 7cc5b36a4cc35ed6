"""Configuration, logging and constants."""
