"""Utilities - logging setup."""
