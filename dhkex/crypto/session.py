"""Diffie-Hellman session: fixed public parameters plus this party's modulo key."""

import logging
from typing import TYPE_CHECKING, Optional

from dhkex.common.errors import InvalidArgument
from dhkex.common.protocol import ModuloKeyMessage, PublicParameters
from dhkex.crypto.keys import (
    CommonSecretKey,
    GenerationSetting,
    OwnModuloKey,
    PartnerModuloKey,
    PublicGenerator,
    PublicPrime,
    SecretKey,
)
from dhkex.crypto.numbers import RandFunc

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric import dh as crypto_dh

logger = logging.getLogger(__name__)


class DHSession:
    """
    One party's side of a Diffie-Hellman exchange.

    The prime p and generator g are resolved on construction (validated when
    supplied, generated otherwise) and never change. The secret is only used
    to derive the own modulo key and is not kept; pass it again to
    common_secret_key().

    Construction modes:
        DHSession(secret, prime, generator)   both validated
        DHSession(secret, prime)              g defaults to 2
        DHSession.generate(secret, prime_bits, prime_random,
                           generator_bits, generator_random)   both generated
        DHSession.generate(secret, prime_bits, prime_random)   g defaults to 2

    Raises (on construction):
        InvalidArgument: Missing or out-of-range input
        ParameterError: p is not a safe prime, g is not a primitive root,
            or generator search ran out of attempts
    """

    __slots__ = ("_prime", "_generator", "_modulo_key")

    def __init__(self, secret: int, prime: int, generator: Optional[int] = None):
        public_prime = PublicPrime(prime)
        if generator is None:
            public_generator = PublicGenerator.default(public_prime)
        else:
            public_generator = PublicGenerator(generator, public_prime)
        self._bind(secret, public_prime, public_generator)

    @classmethod
    def generate(
        cls,
        secret: int,
        prime_bits: int,
        prime_random: RandFunc,
        generator_bits: Optional[int] = None,
        generator_random: Optional[RandFunc] = None
    ) -> "DHSession":
        """
        Build a session with a freshly generated safe prime.

        The generator is searched for only when both generator_bits and
        generator_random are given; otherwise it defaults to 2. The prime
        search is unbounded, see generate_safe_prime().

        Args:
            secret: Secret exponent (>= 2)
            prime_bits: Requested prime size; the result may be one bit longer
            prime_random: Callable returning n random bytes for the prime
            generator_bits: Requested generator size
            generator_random: Callable returning n random bytes for the generator

        Returns:
            A fully constructed session
        """
        wants_generator = generator_bits is not None or generator_random is not None
        if wants_generator and (generator_bits is None or generator_random is None):
            raise InvalidArgument("generator bit length and random source must be given together")

        prime_setting = GenerationSetting(prime_bits, prime_random)
        generator_setting = GenerationSetting(generator_bits, generator_random) if wants_generator else None

        public_prime = PublicPrime.generate(prime_setting)
        if generator_setting is not None:
            public_generator = PublicGenerator.generate(generator_setting, public_prime)
        else:
            public_generator = PublicGenerator.default(public_prime)

        session = cls.__new__(cls)
        session._bind(secret, public_prime, public_generator)
        return session

    @classmethod
    def from_parameters(cls, secret: int, params: PublicParameters) -> "DHSession":
        """Build the responding side from the peer's announced parameters."""
        if params is None:
            raise InvalidArgument("public parameters are missing")
        return cls(secret, params.p, params.g)

    def _bind(self, secret: int, prime: PublicPrime, generator: PublicGenerator):
        modulo_key = OwnModuloKey.derive(generator, SecretKey(secret), prime)
        self._assign(prime, generator, modulo_key)
        logger.debug("session ready: %d-bit prime, generator %d", prime.value.bit_length(), generator.value)

    def _assign(self, prime: PublicPrime, generator: PublicGenerator, modulo_key: OwnModuloKey):
        object.__setattr__(self, "_prime", prime)
        object.__setattr__(self, "_generator", generator)
        object.__setattr__(self, "_modulo_key", modulo_key)

    def __reduce__(self):
        return _restore_session, (self._prime, self._generator, self._modulo_key)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(p=<{self.public_prime.bit_length()} bits>, g={self.public_generator})"

    @property
    def public_prime(self) -> int:
        return self._prime.value

    @property
    def public_generator(self) -> int:
        return self._generator.value

    @property
    def own_modulo_key(self) -> int:
        return self._modulo_key.value

    def common_secret_key(self, partner_modulo_key: int, secret: int) -> int:
        """
        Derive the shared secret from the peer's modulo key.

        Computed fresh on every call. Any valid secret is accepted; it is
        not checked against the one used at construction.

        Args:
            partner_modulo_key: Peer's modulo key
            secret: Secret exponent (>= 2)

        Returns:
            partner_modulo_key^secret mod p
        """
        return CommonSecretKey.derive(
            PartnerModuloKey(partner_modulo_key), SecretKey(secret), self._prime
        ).value

    def public_parameters(self) -> PublicParameters:
        return PublicParameters(p=self.public_prime, g=self.public_generator)

    def modulo_key_message(self) -> ModuloKeyMessage:
        return ModuloKeyMessage(m=self.own_modulo_key)

    def parameter_numbers(self) -> "crypto_dh.DHParameterNumbers":
        """Return (p, g) as cryptography DHParameterNumbers."""
        from cryptography.hazmat.primitives.asymmetric import dh as crypto_dh

        return crypto_dh.DHParameterNumbers(self.public_prime, self.public_generator)

    def public_numbers(self) -> "crypto_dh.DHPublicNumbers":
        """Return the own modulo key as cryptography DHPublicNumbers."""
        from cryptography.hazmat.primitives.asymmetric import dh as crypto_dh

        return crypto_dh.DHPublicNumbers(self.own_modulo_key, self.parameter_numbers())


def _restore_session(prime: PublicPrime, generator: PublicGenerator, modulo_key: OwnModuloKey) -> DHSession:
    """Rebuild a session from already validated parts (used by pickle and copy)."""
    session = DHSession.__new__(DHSession)
    session._assign(prime, generator, modulo_key)
    return session
