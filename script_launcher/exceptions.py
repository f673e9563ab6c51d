"""Errors raised by the launcher. Each one ends the invocation with EXIT_FAILURE."""


class LauncherError(Exception):
    """Base exception for launcher errors"""

    default_message = "Launcher error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class UsageError(LauncherError):
    default_message = "Usage: launcher <script-path> --network <network>"


class NoCredentialConfigured(LauncherError):
    default_message = (
        "You don't have a deployer account. "
        "Run `launcher-account generate` or `launcher-account import` first"
    )


class DecryptionError(LauncherError):
    default_message = "Failed to decrypt private key. Wrong password?"


class DispatchError(LauncherError):
    default_message = "Failed to start script runner"


class PromptAborted(LauncherError):
    default_message = "Password prompt aborted"
