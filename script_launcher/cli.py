#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys

from dotenv import find_dotenv, load_dotenv

from script_launcher.config.logging_config import get_launcher_logger
from script_launcher.config.network import get_default_network
from script_launcher.config.runtime import EXIT_FAILURE, get_runner_command
from script_launcher.dispatcher import Dispatcher
from script_launcher.exceptions import LauncherError, UsageError
from script_launcher.launcher import build_request, launch
from script_launcher.setup.keystore import EnvKeystore
from script_launcher.setup.prompt import getpass_prompt


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launcher",
        description="Run a script against a network, unlocking the deployer key for non-local networks",
    )
    parser.add_argument("--runner", help="Command that runs the script (default $SCRIPT_RUNNER or 'hardhat run')")
    parser.add_argument("--env-file", help="Path to .env file to load before resolving env vars (default ./.env)")
    parser.add_argument("--log-level", help="Log level (default $LAUNCHER_LOG_LEVEL or WARNING)")
    parser.add_argument("script_path", nargs="?", help="Script to run")
    parser.add_argument("script_args", nargs=argparse.REMAINDER, help="Arguments forwarded to the script, e.g. --network sepolia")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv(args.env_file or find_dotenv(usecwd=True))
    logger = get_launcher_logger(args.log_level)

    try:
        request = build_request(args.script_path, args.script_args, get_default_network())
        dispatcher = Dispatcher(runner=get_runner_command(args.runner))
        return launch(request, keystore=EnvKeystore(), prompt=getpass_prompt, dispatcher=dispatcher)
    except UsageError as e:
        print(str(e), file=sys.stderr)
        if args.script_path:
            print(UsageError.default_message, file=sys.stderr)
        return EXIT_FAILURE
    except LauncherError as e:
        logger.debug("Launch aborted: %s", type(e).__name__)
        print(str(e), file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
