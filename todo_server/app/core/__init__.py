"""Configuration, logging, database helpers and store errors."""
