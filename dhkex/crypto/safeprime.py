"""Safe-prime generation using the double-speed search.

Every draw is a random prime q. Two safe-prime shapes are tested per draw:
q itself (when (q - 1) / 2 is prime) and 2q + 1 (when q is a Sophie Germain
prime). See https://eprint.iacr.org/2003/175.pdf.
"""

import logging
from typing import Optional

from dhkex.crypto.numbers import RandFunc, is_probable_prime, random_prime, retry_until

logger = logging.getLogger(__name__)


def _draw_safe_prime(bit_length: int, randfunc: RandFunc) -> Optional[int]:
    q = random_prime(bit_length, randfunc)
    if is_probable_prime((q - 1) // 2):
        return q
    candidate = 2 * q + 1
    if is_probable_prime(candidate):
        return candidate
    return None


def generate_safe_prime(bit_length: int, randfunc: RandFunc) -> int:
    """
    Generate a safe prime p = 2q + 1 (q prime) of roughly bit_length bits.

    The result has bit_length bits when the drawn prime is itself safe, and
    bit_length + 1 bits when it is accepted as the Sophie Germain half of
    2q + 1. Both outcomes are expected.

    The search has no attempt bound and no cancellation hook. Safe primes
    are dense enough for it to finish in practice, but it keeps drawing
    until one is found; run it off the calling thread if that matters.

    Args:
        bit_length: Requested size in bits (>= 2)
        randfunc: Callable returning n random bytes

    Returns:
        A probable safe prime
    """
    logger.info("searching for a %d-bit safe prime", bit_length)
    prime = retry_until(lambda: _draw_safe_prime(bit_length, randfunc))
    logger.info("found a %d-bit safe prime", prime.bit_length())
    return prime
