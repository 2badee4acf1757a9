"""Diffie-Hellman modulo key and common secret derivation."""

from dhkex.crypto.numbers import mod_exp


# Well-known safe prime with generator 2 (RFC 3526 MODP group 14, 2048-bit)
MODP_2048_P = 0xFFFFFFFFFFFFFFFFC90FDAA22168C234C4C6628B80DC1CD129024E088A67CC74020BBEA63B139B22514A08798E3404DDEF9519B3CD3A431B302B0A6DF25F14374FE1356D6D51C245E485B576625E7EC6F44C42E9A637ED6B0BFF5CB6F406B7EDEE386BFB5A899FA5AE9F24117C4B1FE649286651ECE45B3DC2007CB8A163BF0598DA48361C55D39A69163FA8FD24CF5F83655D23DCA3AD961C62F356208552BB9ED529077096966D670C354E4ABC9804F1746C08CA18217C32905E462E36CE3BE39E772C180E86039B2783A2EC07A28FB5C55DF06F4C52C9DE2BCBF6955817183995497CEA956AE515D2261898FA051015728E5A8AACAA68FFFFFFFFFFFFFFFF

DEFAULT_G = 2


def derive_modulo_key(generator: int, secret: int, prime: int) -> int:
    """
    Compute a party's public modulo key: m = g^secret mod p.

    Args:
        generator: Public generator g
        secret: Caller's secret exponent
        prime: Public safe prime p

    Returns:
        Modulo key m, safe to send to the peer
    """
    return mod_exp(generator, secret, prime)


def derive_common_secret(partner_modulo_key: int, secret: int, prime: int) -> int:
    """
    Compute the shared secret: K = partner_modulo_key^secret mod p.

    Args:
        partner_modulo_key: Peer's modulo key (g^peer_secret mod p)
        secret: Caller's secret exponent
        prime: Public safe prime p

    Returns:
        Common secret K, identical on both sides
    """
    return mod_exp(partner_modulo_key, secret, prime)
