"""Shared fixtures: deterministic random byte sources."""

import random

import pytest


def seeded_randfunc(seed: int):
    """Return a randfunc(n) -> bytes that replays the same stream for a given seed."""
    return random.Random(seed).randbytes


@pytest.fixture
def randfunc():
    return seeded_randfunc(1234)


@pytest.fixture
def make_randfunc():
    return seeded_randfunc
