import pytest

from moysekret.crypto.box import open_envelope, seal
from moysekret.crypto.keygen import generate_keypair
from moysekret.storage.envelope import deserialize, serialize
from moysekret.utils.dataModels import ENVELOPE_HDR_SIZE, KEY_SIZE, NONCE_SIZE, Envelope
from moysekret.utils.errors import AuthenticationFailed


@pytest.fixture(scope="module")
def keypair():
    return generate_keypair()


def test_generate_keypair_sizes():
    kp = generate_keypair()
    assert len(kp.public_key) == KEY_SIZE
    assert len(kp.secret_key) == KEY_SIZE
    assert kp.public_key != kp.secret_key


def test_generate_keypair_is_fresh():
    assert generate_keypair().secret_key != generate_keypair().secret_key


def test_public_key_matches_nacl_derivation(keypair):
    from nacl.public import PrivateKey

    assert bytes(PrivateKey(keypair.secret_key).public_key) == keypair.public_key


@pytest.mark.parametrize("plaintext", [b"", b"x", b"hello world", bytes(range(256)) * 40])
def test_round_trip(keypair, plaintext):
    env = seal(plaintext, keypair)
    assert open_envelope(env, keypair) == plaintext


def test_seal_shape(keypair):
    env = seal(b"abc", keypair)
    assert len(env.nonce) == NONCE_SIZE
    # Poly1305 tag prefixes the ciphertext
    assert len(env.ciphertext) == 3 + 16


def test_nonce_uniqueness(keypair):
    a = seal(b"same plaintext", keypair)
    b = seal(b"same plaintext", keypair)
    assert a.nonce != b.nonce
    assert a.ciphertext != b.ciphertext


def test_self_seal_matches_nacl_box(keypair):
    from nacl.public import Box, PrivateKey, PublicKey

    env = seal(b"interop", keypair)
    box = Box(PrivateKey(keypair.secret_key), PublicKey(keypair.public_key))
    assert box.decrypt(env.ciphertext, env.nonce) == b"interop"


def test_every_bit_flip_is_rejected(keypair):
    data = serialize(seal(b"tamper me", keypair))
    for i in range(ENVELOPE_HDR_SIZE - NONCE_SIZE - 8, len(data)):
        if ENVELOPE_HDR_SIZE - 8 <= i < ENVELOPE_HDR_SIZE:
            continue  # ciphertext length field
        for bit in range(8):
            flipped = bytearray(data)
            flipped[i] ^= 1 << bit
            with pytest.raises(AuthenticationFailed):
                open_envelope(deserialize(bytes(flipped)), keypair)


def test_wrong_keypair_fails(keypair):
    env = seal(b"for my eyes only", keypair)
    with pytest.raises(AuthenticationFailed) as e:
        open_envelope(env, generate_keypair())
    assert str(e.value) == "Could not decrypt file"
    assert e.value.__cause__ is None


def test_truncated_ciphertext_fails(keypair):
    env = seal(b"for my eyes only", keypair)
    with pytest.raises(AuthenticationFailed):
        open_envelope(Envelope(nonce=env.nonce, ciphertext=env.ciphertext[:-1]), keypair)
    with pytest.raises(AuthenticationFailed):
        open_envelope(Envelope(nonce=env.nonce, ciphertext=b""), keypair)
