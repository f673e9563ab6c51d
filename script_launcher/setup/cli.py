#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from dotenv import dotenv_values, load_dotenv, set_key
from eth_account import Account

from script_launcher.config.runtime import ENCRYPTED_KEY_ENV, PASSWORD_PROMPT
from script_launcher.exceptions import DecryptionError
from script_launcher.setup.keystore import (
    EnvKeystore,
    decrypt_keystore,
    encrypt_private_key,
    keystore_address,
)
from script_launcher.setup.prompt import ask_new_password, getpass_prompt

DEFAULT_ENV_FILE = ".env"


def _store_encrypted_key(priv_hex: str, env_file: Path, force: bool) -> int:
    existing = dotenv_values(env_file).get(ENCRYPTED_KEY_ENV) if env_file.exists() else None
    if existing and not force:
        print(f"{ENCRYPTED_KEY_ENV} already present in {env_file}; refusing to overwrite (use --force)", file=sys.stderr)
        return 2

    password = ask_new_password(getpass_prompt)
    keystore, address = encrypt_private_key(priv_hex, password)

    env_file.parent.mkdir(parents=True, exist_ok=True)
    env_file.touch(exist_ok=True)
    set_key(str(env_file), ENCRYPTED_KEY_ENV, json.dumps(keystore, separators=(",", ":")))

    print(f"Stored encrypted deployer key in {env_file}")
    print(f"Address: {address}")
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    try:
        acct = Account.create()
        priv_hex = "0x" + bytes(acct.key).hex()
        return _store_encrypted_key(priv_hex, Path(args.env_file), args.force)
    except ValueError as ve:
        print(f"Invalid input: {ve}", file=sys.stderr)
        return 2
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_import(args: argparse.Namespace) -> int:
    try:
        priv_hex = getpass_prompt("Paste your private key: ").strip()
        if not priv_hex:
            print("No private key provided", file=sys.stderr)
            return 2
        try:
            return _store_encrypted_key(priv_hex, Path(args.env_file), args.force)
        except ValueError as ve:
            print(f"Invalid input: {ve}", file=sys.stderr)
            return 2
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_address(args: argparse.Namespace) -> int:
    try:
        load_dotenv(args.env_file)
        encrypted = EnvKeystore().load()
        if encrypted is None:
            print(f"No deployer account configured ({ENCRYPTED_KEY_ENV} not set)", file=sys.stderr)
            return 1
        address = keystore_address(encrypted)
        if address is None:
            print("Stored keystore does not record an address", file=sys.stderr)
            return 1
        print(f"Address: {address}")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_reveal(args: argparse.Namespace) -> int:
    try:
        if not args.insecure_plain:
            print("Refusing to print private key without --insecure-plain", file=sys.stderr)
            return 2
        load_dotenv(args.env_file)
        encrypted = EnvKeystore().load()
        if encrypted is None:
            print(f"No deployer account configured ({ENCRYPTED_KEY_ENV} not set)", file=sys.stderr)
            return 1
        secret = decrypt_keystore(encrypted, getpass_prompt(PASSWORD_PROMPT))
        try:
            print(f"Private key: {secret.reveal()}")
        finally:
            secret.wipe()
        return 0
    except DecryptionError as de:
        print(f"Decryption failed: {de}", file=sys.stderr)
        return 3
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="launcher-account", description="Manage the encrypted deployer account")
    sub = parser.add_subparsers(dest="cmd")

    # generate
    p_gen = sub.add_parser("generate", help="Create a random deployer key and store it encrypted")
    p_gen.add_argument("--env-file", default=DEFAULT_ENV_FILE, help="Env file to write (default .env)")
    p_gen.add_argument("--force", action="store_true", help=f"Overwrite an existing {ENCRYPTED_KEY_ENV}")
    p_gen.set_defaults(func=cmd_generate)

    # import
    p_imp = sub.add_parser("import", help="Encrypt an existing private key (read from a hidden prompt) and store it")
    p_imp.add_argument("--env-file", default=DEFAULT_ENV_FILE, help="Env file to write (default .env)")
    p_imp.add_argument("--force", action="store_true", help=f"Overwrite an existing {ENCRYPTED_KEY_ENV}")
    p_imp.set_defaults(func=cmd_import)

    # address
    p_addr = sub.add_parser("address", help="Show the deployer address without decrypting")
    p_addr.add_argument("--env-file", default=DEFAULT_ENV_FILE, help="Env file to load (default .env)")
    p_addr.set_defaults(func=cmd_address)

    # reveal
    p_rev = sub.add_parser("reveal", help="Decrypt and print the deployer private key")
    p_rev.add_argument("--env-file", default=DEFAULT_ENV_FILE, help="Env file to load (default .env)")
    p_rev.add_argument("--insecure-plain", action="store_true", help="Acknowledge insecurity when printing the private key")
    p_rev.set_defaults(func=cmd_reveal)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 2
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
