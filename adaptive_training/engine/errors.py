"""Error types for the decision engine.

Distinct error types to differentiate caller input errors from engine bugs.
"""


class AdaptiveTrainingError(Exception):
    """Base class for all engine errors."""


class InvalidInputError(AdaptiveTrainingError, ValueError):
    """Raised when a decision call receives a plan or feedback it cannot use.

    The call is failed as a whole; no adjustment is applied. Callers should
    surface the message and retry with corrected input.
    """

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        self.message = message or f"Invalid input for field: {field}"
        super().__init__(self.message)
