from cryptography.hazmat.primitives.asymmetric.x25519 import X25519PrivateKey

from moysekret.utils.dataModels import KeyPair


def generate_keypair() -> KeyPair:
    """Fresh Curve25519 pair; the raw halves are crypto_box keys as-is."""
    private = X25519PrivateKey.generate()
    return KeyPair(
        public_key=private.public_key().public_bytes_raw(),
        secret_key=private.private_bytes_raw(),
    )
