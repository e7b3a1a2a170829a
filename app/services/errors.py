"""Exceptions raised by the board loader and the movement engine."""


class EngineError(ValueError):
    """Base class for engine errors.

    ``code`` is a stable identifier suitable for client localisation.
    """

    code = "ENGINE_ERROR"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code
        self.message = message


class InvalidInput(EngineError):
    """A caller passed a die value or position outside the board's bounds."""

    code = "INVALID_INPUT"


class ConfigurationError(EngineError):
    """The static board tables violate a board invariant."""

    code = "INVALID_BOARD"
