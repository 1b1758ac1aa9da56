# Python Imports
import base58
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

# Project Imports
from near_utils.dataclasses import KeyPair
from near_utils.errors import InvalidKeyFormatError

KEY_TYPE = "ed25519"
SEED_LENGTH = 32
SECRET_KEY_LENGTH = 64


def _split_key_type(key: str) -> str:
    parts = key.split(":")
    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:
        key_type, encoded = parts
        if key_type.lower() != KEY_TYPE:
            raise InvalidKeyFormatError(f"Unknown key type: {key_type}")
        return encoded
    raise InvalidKeyFormatError("Invalid encoded key format, must be <curve>:<encoded key>")


def _decode(encoded: str) -> bytes:
    try:
        return base58.b58decode(encoded)
    except ValueError as e:
        raise InvalidKeyFormatError(f"Invalid base58 in key: {e}") from e


def derive_public_key(private_key: str) -> KeyPair:
    """
    Decode an Ed25519 private key string and derive its public key.

    Accepts ``ed25519:<base58>`` (the prefix may be omitted) where the payload is either
    the 64 byte secret key (seed followed by public key) or the bare 32 byte seed.
    Returns the public key as ``ed25519:<base58>`` and the 64 byte secret key in base58.
    """
    if not isinstance(private_key, str) or not private_key:
        raise InvalidKeyFormatError("Private key must be a non-empty string")

    raw = _decode(_split_key_type(private_key.strip()))
    if len(raw) not in (SEED_LENGTH, SECRET_KEY_LENGTH):
        raise InvalidKeyFormatError(f"Expected {SEED_LENGTH} or {SECRET_KEY_LENGTH} key bytes, got {len(raw)}")

    seed = raw[:SEED_LENGTH]
    public_bytes = Ed25519PrivateKey.from_private_bytes(seed).public_key().public_bytes(
        Encoding.Raw, PublicFormat.Raw
    )
    if len(raw) == SECRET_KEY_LENGTH and raw[SEED_LENGTH:] != public_bytes:
        raise InvalidKeyFormatError("Secret key does not match its embedded public key")

    return KeyPair(
        public_key=f"{KEY_TYPE}:{base58.b58encode(public_bytes).decode('ascii')}",
        secret_key=base58.b58encode(seed + public_bytes).decode('ascii'),
    )


def public_key_from_private(private_key: str) -> str:
    return derive_public_key(private_key).public_key
