"""Environment-driven defaults for parameter generation and validation."""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from dhkex.common.errors import InvalidArgument

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Defaults read from the environment (or a .env file)."""
    prime_bits: int = 2048
    generator_bits: Optional[int] = None  # None: use the default generator 2
    generator_attempts: int = 100
    primality_false_positive_prob: float = 2.0 ** -128


def _read_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgument(f"{name} must be an integer, got {raw!r}")


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise InvalidArgument(f"{name} must be a number, got {raw!r}")
    if not 0.0 < value < 1.0:
        raise InvalidArgument(f"{name} must lie strictly between 0 and 1")
    return value


def load_settings() -> Settings:
    """
    Build Settings from the current environment.

    Recognised variables: DH_PRIME_BITS, DH_GENERATOR_BITS,
    DH_GENERATOR_ATTEMPTS, DH_PRIMALITY_FALSE_POSITIVE_PROB.

    Raises:
        InvalidArgument: If a variable is set to an unusable value
    """
    defaults = Settings()
    prime_bits = _read_int('DH_PRIME_BITS', defaults.prime_bits)
    generator_bits = _read_int('DH_GENERATOR_BITS', defaults.generator_bits)
    attempts = _read_int('DH_GENERATOR_ATTEMPTS', defaults.generator_attempts)

    if prime_bits < 2:
        raise InvalidArgument("DH_PRIME_BITS must be at least 2")
    if generator_bits is not None and generator_bits < 2:
        raise InvalidArgument("DH_GENERATOR_BITS must be at least 2")
    if attempts < 1:
        raise InvalidArgument("DH_GENERATOR_ATTEMPTS must be at least 1")

    return Settings(
        prime_bits=prime_bits,
        generator_bits=generator_bits,
        generator_attempts=attempts,
        primality_false_positive_prob=_read_float(
            'DH_PRIMALITY_FALSE_POSITIVE_PROB', defaults.primality_false_positive_prob
        ),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide Settings, loaded once."""
    return load_settings()
