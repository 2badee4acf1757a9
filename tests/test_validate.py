"""Safe-prime, primitive-root and factorization checks."""

import pytest

from dhkex.crypto.dh import MODP_2048_P
from dhkex.crypto.validate import is_primitive_root, is_safe_prime, prime_factors


@pytest.mark.parametrize("p", [5, 7, 11, 23, 47, 59, 83, 107, 1019, 2039])
def test_safe_primes_accepted(p):
    assert is_safe_prime(p)


@pytest.mark.parametrize("p", [0, 1, 2, 3, 8, 9, 13, 17, 19, 29, 31, 1021])
def test_non_safe_primes_rejected(p):
    assert not is_safe_prime(p)


def test_rfc3526_group14_prime_is_safe():
    assert is_safe_prime(MODP_2048_P)


@pytest.mark.parametrize("n, expected", [
    (1, set()),
    (2, {2}),
    (8, {2}),
    (9, {3}),
    (12, {2, 3}),
    (22, {2, 11}),
    (97, {97}),
    (100, {2, 5}),
    (360, {2, 3, 5}),
    (2038, {2, 1019}),
    (3 * 5 * 7 * 11 * 13, {3, 5, 7, 11, 13}),
])
def test_prime_factors(n, expected):
    assert prime_factors(n) == expected


def test_prime_factors_of_safe_prime_minus_one_is_fast():
    q = (MODP_2048_P - 1) // 2
    assert prime_factors(MODP_2048_P - 1) == {2, q}


@pytest.mark.parametrize("g", [5, 7, 10, 11, 14, 15, 17, 19, 20, 21])
def test_primitive_roots_of_23(g):
    assert is_primitive_root(g, 23)


@pytest.mark.parametrize("g", [2, 3, 4, 6, 8, 9, 12, 13, 16, 18])
def test_non_primitive_roots_of_23(g):
    assert not is_primitive_root(g, 23)


@pytest.mark.parametrize("g", [-1, 0, 1, 22, 23, 100])
def test_out_of_range_generators_rejected(g):
    assert not is_primitive_root(g, 23)


def test_two_is_primitive_root_of_11():
    assert is_primitive_root(2, 11)
    assert is_primitive_root(3, 7)
    assert not is_primitive_root(2, 7)
