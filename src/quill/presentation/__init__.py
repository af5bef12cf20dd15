"""Presentation layer - HTTP API and CLI."""
