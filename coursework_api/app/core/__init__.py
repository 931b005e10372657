"""Configuration, logging, storage and error translation."""
