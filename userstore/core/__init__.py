"""Core constants and exceptions."""
