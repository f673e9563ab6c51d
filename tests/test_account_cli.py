"""Tests for the launcher-account commands."""

import pytest
from dotenv import dotenv_values
from eth_account import Account

from script_launcher.config.runtime import ENCRYPTED_KEY_ENV
from script_launcher.setup import cli as account_cli
from script_launcher.setup import keystore as keystore_mod
from script_launcher.setup.keystore import decrypt_keystore

from conftest import FAST_KDF, TEST_PASSWORD, TEST_PRIVATE_KEY


def _answers(*values):
    it = iter(values)
    return lambda text: next(it)


@pytest.fixture(autouse=True)
def fast_encrypt(monkeypatch):
    monkeypatch.setattr(
        account_cli,
        "encrypt_private_key",
        lambda pk, pw: keystore_mod.encrypt_private_key(pk, pw, **FAST_KDF),
    )


class TestGenerate:
    def test_writes_encrypted_key(self, tmp_path, monkeypatch, capsys):
        env_file = tmp_path / ".env"
        monkeypatch.setattr(account_cli, "getpass_prompt", _answers(TEST_PASSWORD, TEST_PASSWORD))

        assert account_cli.main(["generate", "--env-file", str(env_file)]) == 0

        stored = dotenv_values(env_file)[ENCRYPTED_KEY_ENV]
        secret = decrypt_keystore(stored, TEST_PASSWORD)
        address = Account.from_key(secret.reveal()).address
        assert f"Address: {address}" in capsys.readouterr().out

    def test_keeps_other_entries(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("RPC_URL=https://rpc.example.org\n")
        monkeypatch.setattr(account_cli, "getpass_prompt", _answers(TEST_PASSWORD, TEST_PASSWORD))

        assert account_cli.main(["generate", "--env-file", str(env_file)]) == 0

        values = dotenv_values(env_file)
        assert values["RPC_URL"] == "https://rpc.example.org"
        assert ENCRYPTED_KEY_ENV in values

    def test_refuses_overwrite(self, tmp_path, monkeypatch, capsys):
        env_file = tmp_path / ".env"
        env_file.write_text(f"{ENCRYPTED_KEY_ENV}=existing\n")
        monkeypatch.setattr(account_cli, "getpass_prompt", _answers())

        assert account_cli.main(["generate", "--env-file", str(env_file)]) == 2
        assert "refusing to overwrite" in capsys.readouterr().err
        assert dotenv_values(env_file)[ENCRYPTED_KEY_ENV] == "existing"

    def test_force_overwrites(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text(f"{ENCRYPTED_KEY_ENV}=existing\n")
        monkeypatch.setattr(account_cli, "getpass_prompt", _answers(TEST_PASSWORD, TEST_PASSWORD))

        assert account_cli.main(["generate", "--env-file", str(env_file), "--force"]) == 0
        assert dotenv_values(env_file)[ENCRYPTED_KEY_ENV] != "existing"

    def test_password_mismatch(self, tmp_path, monkeypatch, capsys):
        env_file = tmp_path / ".env"
        monkeypatch.setattr(account_cli, "getpass_prompt", _answers("one", "two"))

        assert account_cli.main(["generate", "--env-file", str(env_file)]) == 2
        err = capsys.readouterr().err
        assert "Invalid input" in err
        assert "do not match" in err
        assert not env_file.exists()

    def test_empty_password(self, tmp_path, monkeypatch, capsys):
        env_file = tmp_path / ".env"
        monkeypatch.setattr(account_cli, "getpass_prompt", _answers("", ""))

        assert account_cli.main(["generate", "--env-file", str(env_file)]) == 2
        assert "must not be empty" in capsys.readouterr().err
        assert not env_file.exists()


class TestImport:
    def test_imports_key(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        monkeypatch.setattr(account_cli, "getpass_prompt", _answers(TEST_PRIVATE_KEY, TEST_PASSWORD, TEST_PASSWORD))

        assert account_cli.main(["import", "--env-file", str(env_file)]) == 0

        stored = dotenv_values(env_file)[ENCRYPTED_KEY_ENV]
        assert decrypt_keystore(stored, TEST_PASSWORD).reveal() == TEST_PRIVATE_KEY

    def test_rejects_bad_key(self, tmp_path, monkeypatch, capsys):
        env_file = tmp_path / ".env"
        monkeypatch.setattr(account_cli, "getpass_prompt", _answers("0x1234", TEST_PASSWORD, TEST_PASSWORD))

        assert account_cli.main(["import", "--env-file", str(env_file)]) == 2
        assert "Invalid input" in capsys.readouterr().err

    def test_password_mismatch_matches_generate(self, tmp_path, monkeypatch, capsys):
        env_file = tmp_path / ".env"
        monkeypatch.setattr(account_cli, "getpass_prompt", _answers(TEST_PRIVATE_KEY, "one", "two"))

        assert account_cli.main(["import", "--env-file", str(env_file)]) == 2
        assert "do not match" in capsys.readouterr().err
        assert not env_file.exists()

    def test_empty_key(self, tmp_path, monkeypatch):
        monkeypatch.setattr(account_cli, "getpass_prompt", _answers("  "))
        assert account_cli.main(["import", "--env-file", str(tmp_path / ".env")]) == 2


class TestAddressAndReveal:
    def test_address(self, monkeypatch, keystore_json, capsys):
        monkeypatch.setenv(ENCRYPTED_KEY_ENV, keystore_json)
        assert account_cli.main(["address"]) == 0
        assert Account.from_key(TEST_PRIVATE_KEY).address in capsys.readouterr().out

    def test_address_without_account(self, capsys):
        assert account_cli.main(["address"]) == 1
        assert "No deployer account" in capsys.readouterr().err

    def test_reveal_requires_flag(self, monkeypatch, keystore_json):
        monkeypatch.setenv(ENCRYPTED_KEY_ENV, keystore_json)
        monkeypatch.setattr(account_cli, "getpass_prompt", _answers())
        assert account_cli.main(["reveal"]) == 2

    def test_reveal(self, monkeypatch, keystore_json, capsys):
        monkeypatch.setenv(ENCRYPTED_KEY_ENV, keystore_json)
        monkeypatch.setattr(account_cli, "getpass_prompt", _answers(TEST_PASSWORD))
        assert account_cli.main(["reveal", "--insecure-plain"]) == 0
        assert TEST_PRIVATE_KEY in capsys.readouterr().out

    def test_reveal_wrong_password(self, monkeypatch, keystore_json, capsys):
        monkeypatch.setenv(ENCRYPTED_KEY_ENV, keystore_json)
        monkeypatch.setattr(account_cli, "getpass_prompt", _answers("nope"))
        assert account_cli.main(["reveal", "--insecure-plain"]) == 3
        assert "Decryption failed" in capsys.readouterr().err

    def test_no_command(self):
        assert account_cli.main([]) == 2
