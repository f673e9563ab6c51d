#!/usr/bin/env python3
"""
Unlocks the deployer key when needed and runs a script with it.

    launcher scripts/add_voter.ts --network sepolia

Local networks (hardhat, localhost) run the script directly. Any other network
needs the encrypted deployer key from DEPLOYER_PRIVATE_KEY_ENCRYPTED, which is
decrypted with a password read from the terminal and exposed to the script
process only, as __RUNTIME_DEPLOYER_PRIVATE_KEY.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from script_launcher.config.network import is_local_network, resolve_network
from script_launcher.config.runtime import PASSWORD_PROMPT
from script_launcher.dispatcher import Dispatcher, DispatchRequest
from script_launcher.exceptions import NoCredentialConfigured, PromptAborted, UsageError
from script_launcher.setup.keystore import EnvKeystore
from script_launcher.setup.prompt import Prompt

logger = logging.getLogger(__name__)


def build_request(script_path: str | None, forwarded_args: Sequence[str], default_network: str) -> DispatchRequest:
    if not script_path:
        raise UsageError()
    if not Path(script_path).is_file():
        raise UsageError(f"Script not found: {script_path}")
    forwarded = tuple(forwarded_args)
    return DispatchRequest(
        script_path=script_path,
        network_name=resolve_network(forwarded, default_network),
        forwarded_args=forwarded,
    )


def launch(
    request: DispatchRequest,
    *,
    keystore: EnvKeystore,
    prompt: Prompt,
    dispatcher: Dispatcher,
) -> int:
    """Run one script, unlocking the deployer key first for remote networks.

    Returns the script's exit code. Raises NoCredentialConfigured or
    DecryptionError or PromptAborted before anything is spawned.
    """
    if is_local_network(request.network_name):
        logger.debug("Network %r is local; dispatching without deployer key", request.network_name)
        return dispatcher.run(request)

    logger.debug("Network %r is remote; deployer key required", request.network_name)
    encrypted = keystore.load()
    if encrypted is None:
        raise NoCredentialConfigured()

    try:
        password = prompt(PASSWORD_PROMPT)
    except (EOFError, KeyboardInterrupt) as e:
        raise PromptAborted() from e
    secret = keystore.decrypt(encrypted, password)
    logger.debug("Deployer key unlocked")
    try:
        return dispatcher.run(request, secret)
    finally:
        secret.wipe()
