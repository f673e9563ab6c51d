import json

import pytest

from script_launcher.config.runtime import ENCRYPTED_KEY_ENV, RUNTIME_KEY_ENV
from script_launcher.setup.keystore import encrypt_private_key

TEST_PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
TEST_PASSWORD = "correct horse battery staple"

# Fast KDF settings; the default scrypt parameters take ~1s and 256MB per call
FAST_KDF = {"kdf": "pbkdf2", "iterations": 2}

LAUNCHER_ENV_VARS = (
    ENCRYPTED_KEY_ENV,
    RUNTIME_KEY_ENV,
    "DEFAULT_NETWORK",
    "SCRIPT_RUNNER",
    "RPC_URL",
    "LAUNCHER_LOG_LEVEL",
    "LAUNCHER_LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate every test from launcher variables and stray .env files."""
    for name in LAUNCHER_ENV_VARS:
        # setenv first so monkeypatch restores the variable to "unset" afterwards,
        # even when load_dotenv() sets it during the test
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(scope="session")
def keystore_json():
    keystore, _ = encrypt_private_key(TEST_PRIVATE_KEY, TEST_PASSWORD, **FAST_KDF)
    return json.dumps(keystore)


@pytest.fixture
def script_file(tmp_path):
    path = tmp_path / "scripts" / "foo.ts"
    path.parent.mkdir()
    path.write_text("// admin script\n")
    return path
