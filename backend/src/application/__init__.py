"""
Application Layer - Use cases and business workflows.

This layer orchestrates domain entities and services and depends only on
the domain layer's repository interfaces for persistence.
"""
