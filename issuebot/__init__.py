"""Triage helpers: webhook signatures and payloads, issue body sections and bot messages."""

__version__ = "0.1.0"