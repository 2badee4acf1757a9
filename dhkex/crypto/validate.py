"""Safe-prime and primitive-root checks for Diffie-Hellman public parameters."""

import logging
from typing import Set

from dhkex.crypto.numbers import is_probable_prime, mod_exp

logger = logging.getLogger(__name__)


def is_safe_prime(p: int) -> bool:
    """
    Check that p is a safe prime, i.e. p and (p - 1) / 2 are both prime.

    Args:
        p: Candidate prime modulus

    Returns:
        True if both p and (p - 1) / 2 pass the probabilistic primality test
    """
    if not is_probable_prime(p):
        return False
    return is_probable_prime((p - 1) // 2)


def prime_factors(n: int) -> Set[int]:
    """
    Return the distinct prime factors of n by trial division.

    Division stops as soon as the remaining cofactor is itself a probable
    prime; that cofactor is the last factor.

    Performance: trial division is exponential in the size of n in the
    worst case. It is only fast here because callers pass n = p - 1 for a
    safe prime p, so n = 2q and the cofactor q is found prime after the
    first division. Do not call this on arbitrary large integers.
    """
    factors = set()
    if n < 2:
        return factors
    if is_probable_prime(n):
        factors.add(n)
        return factors

    i = 2
    while i * i <= n:
        while n % i == 0:
            factors.add(i)
            n //= i
            if is_probable_prime(n):
                factors.add(n)
                return factors
        i += 1 if i == 2 else 2
    if n > 1:
        factors.add(n)
    return factors


def is_primitive_root(g: int, p: int) -> bool:
    """
    Check that g generates the whole multiplicative group modulo p.

    g is a primitive root iff g^((p - 1) / f) != 1 (mod p) for every prime
    factor f of p - 1. Values of g outside [2, p - 2] are rejected up front.

    Args:
        g: Candidate generator
        p: Prime modulus (expected to be a safe prime)

    Returns:
        True if g is a primitive root of p
    """
    n = p - 1
    if g < 2 or g >= n:
        return False
    for factor in prime_factors(n):
        if mod_exp(g, n // factor, p) == 1:
            logger.debug("candidate generator has order dividing (p - 1) / %d", factor)
            return False
    return True
