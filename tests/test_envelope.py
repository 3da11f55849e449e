import struct

import pytest

from moysekret.storage.envelope import deserialize, load_envelope, save_envelope, serialize
from moysekret.utils.dataModels import ENVELOPE_HDR_SIZE, Envelope
from moysekret.utils.errors import MalformedEnvelope, PersistenceError

NONCE = bytes(range(24))


def test_layout_is_length_prefixed_little_endian():
    data = serialize(Envelope(nonce=NONCE, ciphertext=b"\xaa\xbb\xcc"))
    assert ENVELOPE_HDR_SIZE == 40
    assert data[:8] == struct.pack("<Q", 24)
    assert data[8:32] == NONCE
    assert data[32:40] == (3).to_bytes(8, "little")
    assert data[40:] == b"\xaa\xbb\xcc"


def test_deserialize_reverses_serialize():
    env = Envelope(nonce=NONCE, ciphertext=b"payload")
    assert deserialize(serialize(env)) == env


def test_serialize_rejects_bad_nonce():
    with pytest.raises(MalformedEnvelope):
        serialize(Envelope(nonce=b"short", ciphertext=b""))


@pytest.mark.parametrize("size", [0, 1, 23, 24, ENVELOPE_HDR_SIZE - 1])
def test_deserialize_too_small(size):
    with pytest.raises(MalformedEnvelope):
        deserialize(b"\x00" * size)


def test_deserialize_bad_nonce_length():
    data = struct.pack("<Q24sQ", 12, NONCE, 0)
    with pytest.raises(MalformedEnvelope, match="nonce length"):
        deserialize(data)


def test_deserialize_length_mismatch():
    data = struct.pack("<Q24sQ", 24, NONCE, 10) + b"12345"
    with pytest.raises(MalformedEnvelope, match="length mismatch"):
        deserialize(data)


def test_save_and_load(tmp_path):
    path = tmp_path / "bar.txt.cz"
    env = Envelope(nonce=NONCE, ciphertext=b"\x01" * 32)
    save_envelope(path, env)
    assert load_envelope(path) == env
    assert not (tmp_path / "bar.txt.cz.tmp").exists()


def test_save_into_missing_dir(tmp_path):
    with pytest.raises(PersistenceError, match="Could not save encrypted file"):
        save_envelope(tmp_path / "nope" / "x.cz", Envelope(nonce=NONCE, ciphertext=b""))


def test_load_corrupt_file(tmp_path):
    path = tmp_path / "bad.cz"
    path.write_bytes(b"garbage")
    with pytest.raises(MalformedEnvelope) as e:
        load_envelope(path)
    assert str(e.value).startswith("Could not deserialize encrypted data: ")


def test_failed_save_leaves_no_temp_file(tmp_path):
    target = tmp_path / "x.cz"
    target.mkdir()
    with pytest.raises(PersistenceError):
        save_envelope(target, Envelope(nonce=NONCE, ciphertext=b"\x01" * 16))
    assert not (tmp_path / "x.cz.tmp").exists()
