"""
Domain Layer - Core location, slug and feed logic.

This layer has no dependency on frameworks or storage.
"""
