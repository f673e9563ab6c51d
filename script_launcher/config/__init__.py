"""
Configuration package for the script launcher.
"""

from script_launcher.config.network import (
    DEFAULT_NETWORK,
    LOCAL_NETWORKS,
    LOCAL_RPC_URL,
    NETWORK_FLAG,
    get_default_network,
    get_rpc_url,
    is_local_network,
    resolve_network,
)

from script_launcher.config.runtime import (
    DEFAULT_RUNNER,
    ENCRYPTED_KEY_ENV,
    EXIT_FAILURE,
    PASSWORD_PROMPT,
    RUNTIME_KEY_ENV,
    get_runner_command,
)

__all__ = [
    # Network
    'DEFAULT_NETWORK',
    'LOCAL_NETWORKS',
    'LOCAL_RPC_URL',
    'NETWORK_FLAG',
    'get_default_network',
    'get_rpc_url',
    'is_local_network',
    'resolve_network',

    # Runtime
    'DEFAULT_RUNNER',
    'ENCRYPTED_KEY_ENV',
    'EXIT_FAILURE',
    'PASSWORD_PROMPT',
    'RUNTIME_KEY_ENV',
    'get_runner_command',
]
