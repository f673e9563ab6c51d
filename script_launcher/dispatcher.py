#!/usr/bin/env python3
"""
Script dispatcher.

Runs one script through the scripting runtime in a child process that shares
this process's terminal, optionally handing it the unlocked deployer key in a
child-only environment variable, and turns the child's termination into an
exit code for the launcher.
"""
from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from script_launcher.config.runtime import DEFAULT_RUNNER, EXIT_FAILURE, RUNTIME_KEY_ENV
from script_launcher.exceptions import DispatchError
from script_launcher.setup.keystore import DecryptedSecret

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchRequest:
    script_path: str
    network_name: str
    forwarded_args: tuple[str, ...] = ()


def build_command(request: DispatchRequest, runner: Sequence[str] = DEFAULT_RUNNER) -> list[str]:
    """runner + script + forwarded args, verbatim and in order."""
    return [*runner, request.script_path, *request.forwarded_args]


def build_child_env(base_env: Mapping[str, str], secret: DecryptedSecret | None = None) -> dict[str, str]:
    """Copy base_env for the child; add the runtime key only when a secret is given."""
    env = dict(base_env)
    if secret is None:
        env.pop(RUNTIME_KEY_ENV, None)
    else:
        env[RUNTIME_KEY_ENV] = secret.reveal()
    return env


def exit_code_for(returncode: int | None) -> int:
    """Map a child's returncode to the launcher's exit code.

    A negative returncode means the child was killed by a signal; report the
    shell convention 128 + signal number instead of masking it as success.
    """
    if returncode is None:
        return EXIT_FAILURE
    if returncode < 0:
        return 128 + (-returncode)
    return returncode


class Dispatcher:
    def __init__(
        self,
        runner: Sequence[str] = DEFAULT_RUNNER,
        base_env: Mapping[str, str] | None = None,
        popen: Callable[..., subprocess.Popen] = subprocess.Popen,
    ):
        self.runner = list(runner)
        self._base_env = base_env
        self._popen = popen

    def run(self, request: DispatchRequest, secret: DecryptedSecret | None = None) -> int:
        cmd = build_command(request, self.runner)
        base_env = os.environ if self._base_env is None else self._base_env
        env = build_child_env(base_env, secret)
        logger.info("Running: %s", " ".join(cmd))
        try:
            proc = self._popen(
                cmd,
                env=env,
                stdin=None,
                stdout=None,
                stderr=None,
                shell=sys.platform == "win32",
            )
        except FileNotFoundError as e:
            raise DispatchError(f"Script runner not found: {self.runner[0]}") from e
        except OSError as e:
            raise DispatchError(f"Failed to start script runner {self.runner[0]}: {e.strerror or e}") from e
        finally:
            # The child holds its own copy now
            if secret is not None:
                secret.wipe()
            env.clear()

        try:
            returncode = proc.wait()
        except KeyboardInterrupt:
            # The terminal delivered the interrupt to the child as well
            logger.warning("Interrupted; waiting for script to exit")
            returncode = proc.wait()

        code = exit_code_for(returncode)
        logger.debug("Script exited with returncode %s (exit code %s)", returncode, code)
        return code
