"""Ambient configuration, logging and error types for helpkit."""
