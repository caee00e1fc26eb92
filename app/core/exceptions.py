class ShortCodeNotFound(LookupError):
    """Raised when a short code has no mapping in the store."""

    def __init__(self, short_code: str):
        self.short_code = short_code
        super().__init__(f"URL not found for short code '{short_code}'")
