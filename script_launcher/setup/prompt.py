#!/usr/bin/env python3
from __future__ import annotations

from collections.abc import Callable
from getpass import getpass

# ask(prompt_text) -> answer; blocks until the operator responds
Prompt = Callable[[str], str]


def getpass_prompt(prompt_text: str) -> str:
    """Read a line from the terminal without echoing it."""
    return getpass(prompt_text)


def ask_new_password(prompt: Prompt = getpass_prompt) -> str:
    """Ask for a new keystore password twice.

    Raises ValueError if the password is empty or the two entries differ.
    """
    pw1 = prompt("Set password to encrypt private key: ")
    if not pw1:
        raise ValueError("Password must not be empty")
    pw2 = prompt("Confirm password: ")
    if pw1 != pw2:
        raise ValueError("Passwords do not match")
    return pw1
