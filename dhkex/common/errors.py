"""Exception types raised while building or using a DH session."""


class DHKexError(Exception):
    """Base class for all dhkex errors."""


class InvalidArgument(DHKexError, ValueError):
    """Missing, mistyped or out-of-range input (secret, prime, generator, bit length)."""

    def __init__(self, message: str):
        super().__init__(f"INVALID_ARGUMENT: {message}")


class ParameterError(DHKexError, ValueError):
    """Public parameters rejected: not a safe prime, not a primitive root, or search exhausted."""

    def __init__(self, message: str):
        super().__init__(f"BAD_PARAMETERS: {message}")
