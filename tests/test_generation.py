"""Safe-prime and primitive-root generation."""

import pytest

from dhkex.common.errors import ParameterError
from dhkex.crypto.generator import generate_primitive_root
from dhkex.crypto.safeprime import generate_safe_prime
from dhkex.crypto.validate import is_primitive_root, is_safe_prime


@pytest.mark.parametrize("bits", [2, 3, 4, 5, 8, 12, 16, 24, 32, 48, 64])
def test_generated_prime_is_safe_and_sized(make_randfunc, bits):
    p = generate_safe_prime(bits, make_randfunc(bits * 31))
    assert is_safe_prime(p)
    assert p.bit_length() in (bits, bits + 1)


@pytest.mark.parametrize("seed", range(5))
def test_generated_prime_across_seeds(make_randfunc, seed):
    p = generate_safe_prime(20, make_randfunc(seed))
    assert is_safe_prime(p)
    assert p.bit_length() in (20, 21)


def test_two_bit_request_grows_to_seven(randfunc):
    # the only 2-bit prime is 3, and (3 - 1) / 2 = 1 is not prime
    assert generate_safe_prime(2, randfunc) == 7


def test_generation_is_reproducible(make_randfunc):
    assert generate_safe_prime(40, make_randfunc(99)) == generate_safe_prime(40, make_randfunc(99))


def test_primitive_root_found(make_randfunc):
    g = generate_primitive_root(8, make_randfunc(3), 1019)
    assert g.bit_length() == 8
    assert is_primitive_root(g, 1019)


def test_only_candidate_is_returned(randfunc):
    # the only 2-bit prime candidate is 3, a primitive root of 7
    assert generate_primitive_root(2, randfunc, 7) == 3


def test_search_gives_up_when_no_root_of_that_size_exists(randfunc):
    # 4-bit prime candidates are 11 and 13, both >= 7 - 1
    with pytest.raises(ParameterError, match="cannot construct generator"):
        generate_primitive_root(4, randfunc, 7)


def test_attempt_budget_is_respected(randfunc, monkeypatch):
    from dhkex.crypto import generator

    draws = []

    def counting(bit_length, rf):
        draws.append(bit_length)
        return 37

    monkeypatch.setattr(generator, "random_prime", counting)
    with pytest.raises(ParameterError, match="3 attempts"):
        generate_primitive_root(6, randfunc, 23, attempts=3)
    assert len(draws) == 3
