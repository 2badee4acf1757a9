"""Big integer helpers: probabilistic primality, prime draws and modular exponentiation."""

import logging
from typing import Callable, Optional

from Crypto.Util.number import getPrime, isPrime

from dhkex.common.config import get_settings

logger = logging.getLogger(__name__)

RandFunc = Callable[[int], bytes]


def is_probable_prime(
    n: int,
    false_positive_prob: Optional[float] = None,
    randfunc: Optional[RandFunc] = None
) -> bool:
    """
    Test n for primality with a bounded false-positive probability.

    Args:
        n: Candidate integer
        false_positive_prob: Upper bound on the chance a composite passes
            (default: configured DH_PRIMALITY_FALSE_POSITIVE_PROB, 2^-128)
        randfunc: Source of random bytes for the Miller-Rabin bases
            (default: pycryptodome's system RNG)

    Returns:
        True if n is prime with overwhelming probability, False otherwise
    """
    if n < 2:
        return False
    if false_positive_prob is None:
        false_positive_prob = get_settings().primality_false_positive_prob
    return bool(isPrime(n, false_positive_prob=false_positive_prob, randfunc=randfunc))


def random_prime(bit_length: int, randfunc: RandFunc) -> int:
    """
    Draw a random probable prime of exactly bit_length bits.

    Odd candidates are drawn from randfunc and composites are rejected
    until a prime turns up. getPrime filters at pycryptodome's default
    confidence, so every hit is re-checked at the configured one.
    """
    while True:
        candidate = getPrime(bit_length, randfunc=randfunc)
        if is_probable_prime(candidate, randfunc=randfunc):
            return candidate


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """Compute base^exponent mod modulus by square-and-multiply."""
    return pow(base, exponent, modulus)


def retry_until(draw: Callable[[], Optional[int]]) -> int:
    """
    Call draw() until it returns a value other than None.

    There is no attempt bound: if draw never succeeds this never returns.

    Returns:
        The first non-None result
    """
    draws = 0
    while True:
        draws += 1
        result = draw()
        if result is not None:
            logger.debug("draw succeeded after %d attempt(s)", draws)
            return result
