# app/core/errors.py


class ConfigError(RuntimeError):
    """Required configuration is missing or malformed; the service cannot start."""


class ConflictError(Exception):
    """A request collides with existing state. Surfaced to clients as 409."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmailAlreadyTakenError(ConflictError):
    MESSAGE = "Email is already taken"

    def __init__(self, email: str):
        super().__init__(self.MESSAGE)
        self.email = email
