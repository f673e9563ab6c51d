"""
Runtime settings for the script launcher.

Environment variable names shared between the launcher and the scripts it
dispatches, and the command used to run a script.
"""

import os
import shlex


# Keystore JSON of the deployer account (input, read by the launcher)
ENCRYPTED_KEY_ENV = "DEPLOYER_PRIVATE_KEY_ENCRYPTED"

# Raw deployer key (output, only ever set in a dispatched child's environment)
RUNTIME_KEY_ENV = "__RUNTIME_DEPLOYER_PRIVATE_KEY"

DEFAULT_RUNNER: tuple[str, ...] = ("hardhat", "run")

PASSWORD_PROMPT = "Enter password to decrypt private key: "

EXIT_FAILURE = 1


def get_runner_command(override: str | None = None) -> list[str]:
    """Get the command that runs a script, e.g. ['hardhat', 'run'].

    Precedence: override > env[SCRIPT_RUNNER] > DEFAULT_RUNNER.
    """
    raw = override or os.getenv("SCRIPT_RUNNER")
    if raw:
        parts = shlex.split(raw)
        if parts:
            return parts
    return list(DEFAULT_RUNNER)
