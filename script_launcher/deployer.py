"""
Deployer account for dispatched scripts.

Scripts started by the launcher call get_deployer_account() to get their
signer: the key the launcher unlocked for this run, or the first development
account of the local node when running against a local network.
"""
from __future__ import annotations

import os
from collections.abc import Mapping

from eth_account import Account
from eth_account.signers.local import LocalAccount

from script_launcher.config.network import is_local_network
from script_launcher.config.runtime import RUNTIME_KEY_ENV
from script_launcher.exceptions import NoCredentialConfigured

# Account #0 of the hardhat/anvil development mnemonic; public, never holds real funds
LOCAL_DEV_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"


def get_deployer_account(network_name: str, environ: Mapping[str, str] | None = None) -> LocalAccount:
    environ = os.environ if environ is None else environ
    runtime_key = environ.get(RUNTIME_KEY_ENV)
    if runtime_key:
        return Account.from_key(runtime_key)
    if is_local_network(network_name):
        return Account.from_key(LOCAL_DEV_PRIVATE_KEY)
    raise NoCredentialConfigured(
        f"{RUNTIME_KEY_ENV} is not set; run this script through the launcher to use network '{network_name}'"
    )
