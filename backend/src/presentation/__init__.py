"""Presentation Layer - HTTP API built with FastAPI."""
