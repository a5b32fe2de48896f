"""
Infrastructure Layer - External integrations and implementations.

This layer contains concrete implementations of domain interfaces
and integrations with external services (the PostgreSQL database, settings and the static location dataset).
"""
