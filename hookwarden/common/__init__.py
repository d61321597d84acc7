"""Shared helpers used across Hookwarden packages."""
