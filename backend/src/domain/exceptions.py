"""Domain exceptions."""


class SlugConflictError(Exception):
    """Raised by storage when a slug is already taken."""

    def __init__(self, slug: str):
        super().__init__(f"Slug '{slug}' is already in use")
        self.slug = slug


class SlugGenerationError(Exception):
    """Raised when no free slug was found within the allowed attempts."""

    def __init__(self, attempts: int):
        super().__init__(f"Could not assign a unique slug after {attempts} attempts")
        self.attempts = attempts
