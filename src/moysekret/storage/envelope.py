import logging
import os
import struct

from pathlib import Path

from moysekret.utils.dataModels import ENVELOPE_HDR_FMT, ENVELOPE_HDR_SIZE, NONCE_SIZE, Envelope
from moysekret.utils.errors import MalformedEnvelope, PersistenceError

logger = logging.getLogger(__name__)


def serialize(envelope: Envelope) -> bytes:
    if len(envelope.nonce) != NONCE_SIZE:
        raise MalformedEnvelope(f"Nonce must be {NONCE_SIZE} bytes, got {len(envelope.nonce)}")
    header = struct.pack(ENVELOPE_HDR_FMT, NONCE_SIZE, envelope.nonce, len(envelope.ciphertext))
    return header + envelope.ciphertext


def deserialize(data: bytes) -> Envelope:
    if len(data) < ENVELOPE_HDR_SIZE:
        raise MalformedEnvelope("Encrypted file is too small or corrupt")
    nonce_len, nonce, ct_len = struct.unpack(ENVELOPE_HDR_FMT, data[:ENVELOPE_HDR_SIZE])
    if nonce_len != NONCE_SIZE:
        raise MalformedEnvelope(f"Invalid nonce length {nonce_len}")
    ct = data[ENVELOPE_HDR_SIZE:]
    if ct_len != len(ct):
        raise MalformedEnvelope(f"Ciphertext length mismatch: header says {ct_len}, found {len(ct)}")
    return Envelope(nonce=nonce, ciphertext=ct)


def save_envelope(path: Path, envelope: Envelope) -> None:
    tmp = path.with_name(path.name + ".tmp")
    try:
        with tmp.open("wb") as f:
            f.write(serialize(envelope))
        os.replace(tmp, path)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise PersistenceError("Could not save encrypted file") from exc
    logger.debug("Wrote envelope %s (%d bytes of ciphertext)", path, len(envelope.ciphertext))


def load_envelope(path: Path) -> Envelope:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise PersistenceError("Could not read file to decrypt") from exc
    try:
        return deserialize(data)
    except MalformedEnvelope as exc:
        raise exc.rewrap("Could not deserialize encrypted data") from exc
