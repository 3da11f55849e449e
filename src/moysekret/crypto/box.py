import nacl.utils

from nacl.exceptions import CryptoError
from nacl.public import Box, PrivateKey, PublicKey

from moysekret.utils.dataModels import NONCE_SIZE, Envelope, KeyPair
from moysekret.utils.errors import AuthenticationFailed, DecodeError


def _self_box(keypair: KeyPair) -> Box:
    # The profile's own secret and public key sit on both ends of the box.
    # Existing .cz files depend on this shape.
    return Box(PrivateKey(keypair.secret_key), PublicKey(keypair.public_key))


def seal(plaintext: bytes, keypair: KeyPair) -> Envelope:
    nonce = nacl.utils.random(NONCE_SIZE)
    try:
        encrypted = _self_box(keypair).encrypt(plaintext, nonce)
    except CryptoError as exc:
        # e.g. a low-order public key such as all zeros
        raise DecodeError("Could not use key pair") from exc
    return Envelope(nonce=encrypted.nonce, ciphertext=encrypted.ciphertext)


def open_envelope(envelope: Envelope, keypair: KeyPair) -> bytes:
    try:
        return _self_box(keypair).decrypt(envelope.ciphertext, envelope.nonce)
    except CryptoError:
        raise AuthenticationFailed("Could not decrypt file") from None
