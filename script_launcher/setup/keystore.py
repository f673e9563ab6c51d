#!/usr/bin/env python3
from __future__ import annotations

import json
import os
from collections.abc import Mapping
from typing import Any

from eth_account import Account
from eth_account.signers.local import LocalAccount
from eth_utils import to_checksum_address

from script_launcher.config.runtime import ENCRYPTED_KEY_ENV
from script_launcher.exceptions import DecryptionError


def _normalize_privkey_hex(pk: str) -> str:
    if not isinstance(pk, str):
        raise ValueError("private key must be a hex string")
    pk = pk.strip()
    if pk.startswith("0x"):
        pk = pk[2:]
    if len(pk) != 64:
        raise ValueError("private key hex must be 64 characters (32 bytes)")
    int(pk, 16)  # validate hex
    return "0x" + pk


class DecryptedSecret:
    """Raw private key kept in a mutable buffer so it can be zeroed after use."""

    __slots__ = ("_buf",)

    def __init__(self, raw: bytes | bytearray):
        self._buf = bytearray(raw)

    @classmethod
    def from_key_bytes(cls, key_bytes: bytes) -> DecryptedSecret:
        return cls(b"0x" + bytes(key_bytes).hex().encode("ascii"))

    @property
    def wiped(self) -> bool:
        return not self._buf

    def reveal(self) -> str:
        if self.wiped:
            raise RuntimeError("secret has already been wiped")
        return self._buf.decode("ascii")

    def wipe(self) -> None:
        for i in range(len(self._buf)):
            self._buf[i] = 0
        del self._buf[:]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecryptedSecret):
            return NotImplemented
        return self._buf == other._buf

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "DecryptedSecret(<wiped>)" if self.wiped else "DecryptedSecret(<hidden>)"


def encrypt_private_key(private_key_hex: str, password: str, **kdf_options: Any) -> tuple[dict[str, Any], str]:
    """Encrypt a private key into a keystore JSON and return (keystore, checksum address)."""
    priv = _normalize_privkey_hex(private_key_hex)
    acct: LocalAccount = Account.from_key(priv)
    keystore: dict[str, Any] = Account.encrypt(priv, password, **kdf_options)
    address = to_checksum_address(acct.address)
    return keystore, address


def decrypt_keystore(encrypted: str | Mapping[str, Any], password: str) -> DecryptedSecret:
    """Decrypt a keystore JSON (document or string) into the raw private key.

    Raises DecryptionError for a wrong password as well as for a malformed record.
    """
    try:
        keystore_json = json.loads(encrypted) if isinstance(encrypted, str) else dict(encrypted)
        key_bytes = Account.decrypt(keystore_json, password)
    except Exception as e:
        raise DecryptionError() from e
    return DecryptedSecret.from_key_bytes(key_bytes)


def keystore_address(encrypted: str) -> str | None:
    """Checksum address recorded in a keystore JSON, without decrypting it."""
    try:
        data = json.loads(encrypted)
    except ValueError:
        return None
    addr = data.get("address") if isinstance(data, dict) else None
    if not isinstance(addr, str) or not addr:
        return None
    if not addr.startswith("0x"):
        addr = "0x" + addr
    try:
        return to_checksum_address(addr)
    except ValueError:
        return None


class EnvKeystore:
    """Encrypted deployer key stored in an environment variable."""

    def __init__(self, env_name: str = ENCRYPTED_KEY_ENV, environ: Mapping[str, str] | None = None):
        self.env_name = env_name
        self._environ = environ

    def load(self) -> str | None:
        """Return the keystore JSON, or None when no deployer is configured."""
        environ = os.environ if self._environ is None else self._environ
        value = environ.get(self.env_name)
        if value is None or not value.strip():
            return None
        return value

    def decrypt(self, encrypted: str, passphrase: str) -> DecryptedSecret:
        return decrypt_keystore(encrypted, passphrase)
