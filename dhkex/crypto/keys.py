"""Validated value types for Diffie-Hellman keys and parameters.

Each type checks its input on construction and is immutable afterwards,
so holding an instance means holding a valid value.
"""

from dataclasses import dataclass, field
from typing import Optional

from dhkex.common.errors import InvalidArgument, ParameterError
from dhkex.crypto import dh
from dhkex.crypto.generator import generate_primitive_root
from dhkex.crypto.numbers import RandFunc
from dhkex.crypto.safeprime import generate_safe_prime
from dhkex.crypto.validate import is_primitive_root, is_safe_prime

MIN_VALUE = 2


def _require_int(name: str, value, minimum: Optional[int] = None) -> int:
    if value is None:
        raise InvalidArgument(f"{name} is missing")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")
    if minimum is not None and value < minimum:
        raise InvalidArgument(f"{name} is less than {minimum}")
    return value


@dataclass(frozen=True)
class GenerationSetting:
    """Bit length and randomness source for generating a parameter."""
    bit_length: int
    randfunc: RandFunc = field(repr=False, compare=False)

    def __post_init__(self):
        _require_int("bit length", self.bit_length, MIN_VALUE)
        if self.randfunc is None:
            raise InvalidArgument("random source is missing")
        if not callable(self.randfunc):
            raise InvalidArgument("random source must be callable as randfunc(n) -> bytes")


@dataclass(frozen=True)
class SecretKey:
    """A party's secret exponent. Only lives for the call that consumes it."""
    value: int = field(repr=False)

    def __post_init__(self):
        _require_int("secret key", self.value, MIN_VALUE)


@dataclass(frozen=True)
class PublicPrime:
    """Public modulus p; always a safe prime."""
    value: int

    def __post_init__(self):
        _require_int("public prime", self.value, MIN_VALUE)
        if not is_safe_prime(self.value):
            raise ParameterError("public prime is not a safe prime")

    @classmethod
    def generate(cls, setting: GenerationSetting) -> "PublicPrime":
        """Generate a fresh safe prime (bit length may come out one bit larger)."""
        return cls(generate_safe_prime(setting.bit_length, setting.randfunc))


@dataclass(frozen=True)
class PublicGenerator:
    """Public generator g bound to its prime; 2 or a primitive root of p."""
    value: int
    prime: PublicPrime

    def __post_init__(self):
        if not isinstance(self.prime, PublicPrime):
            raise InvalidArgument("public generator needs a validated public prime")
        _require_int("public generator", self.value, MIN_VALUE)
        if self.value != dh.DEFAULT_G and not is_primitive_root(self.value, self.prime.value):
            raise ParameterError("public generator is not a primitive root of the prime")

    @classmethod
    def default(cls, prime: PublicPrime) -> "PublicGenerator":
        return cls(dh.DEFAULT_G, prime)

    @classmethod
    def generate(cls, setting: GenerationSetting, prime: PublicPrime) -> "PublicGenerator":
        """
        Search for a primitive root of prime with setting.bit_length bits.

        Raises:
            ParameterError: If the bounded search finds none
        """
        if not isinstance(prime, PublicPrime):
            raise InvalidArgument("public generator needs a validated public prime")
        return cls(generate_primitive_root(setting.bit_length, setting.randfunc, prime.value), prime)


@dataclass(frozen=True)
class OwnModuloKey:
    """g^secret mod p, the value sent to the peer."""
    value: int

    @classmethod
    def derive(cls, generator: PublicGenerator, secret: SecretKey, prime: PublicPrime) -> "OwnModuloKey":
        return cls(dh.derive_modulo_key(generator.value, secret.value, prime.value))


@dataclass(frozen=True)
class PartnerModuloKey:
    """The peer's modulo key as received; only presence and type are checked."""
    value: int

    def __post_init__(self):
        _require_int("partner modulo key", self.value)


@dataclass(frozen=True)
class CommonSecretKey:
    """partner^secret mod p, the raw shared secret."""
    value: int = field(repr=False)

    @classmethod
    def derive(cls, partner: PartnerModuloKey, secret: SecretKey, prime: PublicPrime) -> "CommonSecretKey":
        return cls(dh.derive_common_secret(partner.value, secret.value, prime.value))
