"""Hookwarden test suite."""
