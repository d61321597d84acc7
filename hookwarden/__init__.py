"""Hookwarden keeps CI notification webhooks in step with owned repositories."""

from __future__ import annotations

__version__ = "0.1.0"
