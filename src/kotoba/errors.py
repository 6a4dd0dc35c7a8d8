class KotobaError(Exception):
    """Base class for errors raised by the learning core."""


class InsufficientDataError(KotobaError):
    """A deck is too small to build a question with four distinct options."""

    def __init__(self, available: int, required: int = 4):
        self.available = available
        self.required = required
        super().__init__(
            f"Need {required} entries with distinct translations, got {available}"
        )
