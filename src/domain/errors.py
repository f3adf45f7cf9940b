class InvalidInput(ValueError):
    """Raised when a calculation input is negative, non-finite or inverted."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
