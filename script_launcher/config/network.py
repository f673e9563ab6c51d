"""
Network configuration for the script launcher.

Decides which networks are local development chains (no real signing key
needed) and which default network applies when a script is launched without
an explicit --network flag.
"""

import os
from collections.abc import Sequence


# =============================================================================
# NETWORK CLASSIFICATION
# =============================================================================

# Ephemeral chains: the in-process hardhat network and a node on localhost
LOCAL_NETWORKS: frozenset[str] = frozenset({"hardhat", "localhost"})

NETWORK_FLAG = "--network"
DEFAULT_NETWORK = "localhost"
LOCAL_RPC_URL = "http://127.0.0.1:8545"


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_default_network() -> str:
    """Get the network used when no --network flag is forwarded.

    Uses the DEFAULT_NETWORK environment variable, falling back to 'localhost'.
    """
    return os.getenv("DEFAULT_NETWORK") or DEFAULT_NETWORK


def resolve_network(forwarded_args: Sequence[str], default_network: str) -> str:
    """Return the network selected by the forwarded script arguments.

    Both ``--network <name>`` and ``--network=<name>`` are recognised; the
    first occurrence of either form wins.

    Args:
        forwarded_args: Arguments that follow the script path, in order.
        default_network: Network to use when no --network flag is present.

    Returns:
        The value of the first --network flag, an empty string when the
        flag is the last argument, or default_network when the flag is absent.
    """
    args = list(forwarded_args)
    prefix = NETWORK_FLAG + "="
    for idx, arg in enumerate(args):
        if arg.startswith(prefix):
            return arg[len(prefix):]
        if arg == NETWORK_FLAG:
            if idx + 1 >= len(args):
                return ""
            return args[idx + 1]
    return default_network


def is_local_network(network_name: str) -> bool:
    """True only for the known ephemeral networks; anything else needs a key."""
    return network_name in LOCAL_NETWORKS


def get_rpc_url(network_name: str) -> str:
    """Get the RPC URL for a network.

    Uses RPC_URL environment variable if set, otherwise the local node URL for
    local networks.

    Raises:
        ValueError: If a remote network is requested without RPC_URL.
    """
    env_rpc = os.getenv("RPC_URL")
    if env_rpc:
        return env_rpc
    if is_local_network(network_name):
        return LOCAL_RPC_URL
    raise ValueError(f"No RPC URL for network '{network_name}'. Set RPC_URL.")
