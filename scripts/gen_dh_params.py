"""
Diffie-Hellman Parameter Generator
Generates a safe prime and generator, or checks a given pair, and prints them as JSON.
"""

import argparse
import json
import logging
import secrets
import sys
from pathlib import Path
from typing import Optional

from dhkex.common.config import Settings, load_settings
from dhkex.common.errors import DHKexError
from dhkex.common.protocol import PublicParameters
from dhkex.common.utils import b64e, int_to_bytes
from dhkex.crypto.keys import GenerationSetting, PublicGenerator, PublicPrime

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def generate_parameters(prime_bits: int, generator_bits: Optional[int] = None) -> PublicParameters:
    """Generate a safe prime and, if generator_bits is set, a primitive root of it."""
    prime = PublicPrime.generate(GenerationSetting(prime_bits, secrets.token_bytes))
    if generator_bits is None:
        generator = PublicGenerator.default(prime)
    else:
        generator = PublicGenerator.generate(GenerationSetting(generator_bits, secrets.token_bytes), prime)
    return PublicParameters(p=prime.value, g=generator.value)


def check_parameters(p: int, g: int = 2) -> PublicParameters:
    """Validate a (p, g) pair; raises DHKexError if it is unusable."""
    prime = PublicPrime(p)
    generator = PublicGenerator(g, prime)
    return PublicParameters(p=prime.value, g=generator.value)


def render(params: PublicParameters, as_b64: bool = False) -> str:
    """Serialize parameters to JSON, optionally with base64 big-endian integers."""
    payload = params.model_dump()
    if as_b64:
        payload["p"] = b64e(int_to_bytes(params.p))
        payload["g"] = b64e(int_to_bytes(params.g))
    return json.dumps(payload)


def parse_int(text: str) -> int:
    """Accept decimal or 0x-prefixed hexadecimal integers."""
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")


def setup_argument_parser(settings: Settings):
    """Configure command-line interface."""
    parser = argparse.ArgumentParser(
        description="Generate or check Diffie-Hellman public parameters"
    )
    parser.add_argument(
        "--prime-bits",
        type=int,
        default=settings.prime_bits,
        help=f"Safe prime size in bits (default: {settings.prime_bits})"
    )
    parser.add_argument(
        "--generator-bits",
        type=int,
        default=settings.generator_bits,
        help="Generator size in bits (default: use generator 2)"
    )
    parser.add_argument(
        "--check",
        nargs="+",
        type=parse_int,
        metavar="N",
        help="Validate a prime P and optional generator G instead of generating: --check P [G]"
    )
    parser.add_argument(
        "--out",
        help="Write the JSON to this file instead of stdout"
    )
    parser.add_argument(
        "--b64",
        action="store_true",
        help="Encode p and g as base64 big-endian bytes"
    )
    parser.add_argument(
        "--log",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)"
    )
    return parser


def main(argv=None) -> int:
    try:
        settings = load_settings()
    except DHKexError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    arguments = setup_argument_parser(settings).parse_args(argv)
    logging.basicConfig(level=getattr(logging, arguments.log))

    try:
        if arguments.check:
            if len(arguments.check) > 2:
                print("Error: --check takes a prime and an optional generator", file=sys.stderr)
                return 2
            params = check_parameters(*arguments.check)
            print(f"Parameters valid: {params.p.bit_length()}-bit safe prime, generator {params.g}",
                  file=sys.stderr)
        else:
            print(f"Creating {arguments.prime_bits}-bit DH parameters... please wait.", file=sys.stderr)
            params = generate_parameters(arguments.prime_bits, arguments.generator_bits)
    except DHKexError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = render(params, arguments.b64)
    if arguments.out:
        Path(arguments.out).write_text(output + "\n")
        print(f"DH parameters written to: {arguments.out}", file=sys.stderr)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
