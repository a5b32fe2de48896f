"""Domain Services - Stateless location, slug and feed logic."""
