"""
Launcher for contract administration scripts.

Runs a script against a network, unlocking the encrypted deployer key and
handing it to the script process when the network is not a local one.
"""

from script_launcher.dispatcher import Dispatcher, DispatchRequest
from script_launcher.exceptions import (
    DecryptionError,
    DispatchError,
    LauncherError,
    NoCredentialConfigured,
    PromptAborted,
    UsageError,
)
from script_launcher.launcher import build_request, launch
from script_launcher.setup.keystore import DecryptedSecret, EnvKeystore

__all__ = [
    'DecryptedSecret',
    'DecryptionError',
    'DispatchError',
    'DispatchRequest',
    'Dispatcher',
    'EnvKeystore',
    'LauncherError',
    'NoCredentialConfigured',
    'PromptAborted',
    'UsageError',
    'build_request',
    'launch',
]
