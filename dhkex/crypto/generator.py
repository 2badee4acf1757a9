"""Bounded search for a primitive root of a safe prime."""

import logging
from typing import Optional

from dhkex.common.config import get_settings
from dhkex.common.errors import ParameterError
from dhkex.crypto.numbers import RandFunc, random_prime
from dhkex.crypto.validate import is_primitive_root

logger = logging.getLogger(__name__)


def generate_primitive_root(
    bit_length: int,
    randfunc: RandFunc,
    prime: int,
    attempts: Optional[int] = None
) -> int:
    """
    Draw random prime candidates of bit_length bits until one is a primitive root of prime.

    For some combinations (tiny primes, or candidates that are always
    >= prime - 1) no primitive root of the requested size exists, so the
    search gives up after a fixed number of draws.

    Args:
        bit_length: Candidate size in bits (>= 2)
        randfunc: Callable returning n random bytes
        prime: Safe prime the generator must generate
        attempts: Number of draws before giving up
            (default: configured DH_GENERATOR_ATTEMPTS, 100)

    Returns:
        A primitive root of prime

    Raises:
        ParameterError: If no candidate passes within the attempt budget
    """
    if attempts is None:
        attempts = get_settings().generator_attempts

    for attempt in range(1, attempts + 1):
        candidate = random_prime(bit_length, randfunc)
        if is_primitive_root(candidate, prime):
            logger.debug("primitive root found on attempt %d", attempt)
            return candidate

    logger.info("no %d-bit primitive root found in %d attempts", bit_length, attempts)
    raise ParameterError(
        f"cannot construct generator of {bit_length} bits in {attempts} attempts; "
        "change the parameters or use the default generator 2"
    )
