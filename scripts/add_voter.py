#!/usr/bin/env python3
"""
Add voters to the Voting contract allowlist (owner-only call).

Usage
  launcher --runner python scripts/add_voter.py \
    --network sepolia \
    --voter 0xDBC8813F9fEF6b24D14AbC9077D73f9668E47266 \
    [--contract 0xVoting] \
    [--gas 200000]

Behavior
  - Signs with the key unlocked by the launcher (__RUNTIME_DEPLOYER_PRIVATE_KEY),
    or with the local development account on hardhat/localhost.
  - Requires VOTING_CONTRACT_ADDRESS in env unless --contract provided.
  - Prints each voter's allowlist status after the transaction is mined.
"""

from __future__ import annotations

import argparse
import os

from web3 import Web3

from script_launcher.config.network import get_default_network, get_rpc_url
from script_launcher.deployer import get_deployer_account


_VOTING_MIN_ABI = [
    {
        "inputs": [
            {"name": "voters", "type": "address[]"},
            {"name": "statuses", "type": "bool[]"},
        ],
        "name": "addVoters",
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [{"name": "voter", "type": "address"}],
        "name": "getVoterData",
        "outputs": [
            {"name": "isVoter", "type": "bool"},
            {"name": "hasVoted", "type": "bool"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
]


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Add voters to the Voting contract allowlist")
    p.add_argument("--network", default=get_default_network(), help="Network name (default $DEFAULT_NETWORK or localhost)")
    p.add_argument("--contract", default=None, help="Voting contract address (overrides VOTING_CONTRACT_ADDRESS)")
    p.add_argument("--voter", action="append", required=True, help="Voter address (repeatable)")
    p.add_argument("--gas", type=int, default=None, help="Optional gas limit override")
    return p.parse_args()


def main():
    args = parse_args()

    w3 = Web3(Web3.HTTPProvider(get_rpc_url(args.network)))
    if not w3.is_connected():
        raise SystemExit(f"Failed to connect to RPC for network '{args.network}'")

    acct = get_deployer_account(args.network)
    contract_addr = args.contract or os.getenv("VOTING_CONTRACT_ADDRESS")
    if not contract_addr:
        raise SystemExit("VOTING_CONTRACT_ADDRESS is required and not set (or pass --contract).")
    voting = w3.eth.contract(address=w3.to_checksum_address(contract_addr), abi=_VOTING_MIN_ABI)
    voters = [w3.to_checksum_address(v) for v in args.voter]

    tx = voting.functions.addVoters(voters, [True] * len(voters)).build_transaction({
        "from": acct.address,
        "nonce": w3.eth.get_transaction_count(acct.address),
        "chainId": w3.eth.chain_id,
    })
    if args.gas:
        tx["gas"] = int(args.gas)

    signed = acct.sign_transaction(tx)
    raw = getattr(signed, "raw_transaction", None) or getattr(signed, "rawTransaction", None)
    h = w3.eth.send_raw_transaction(raw)
    r = w3.eth.wait_for_transaction_receipt(h)
    if r.status != 1:
        raise SystemExit(f"addVoters reverted: {h.hex()}")
    print("✅ Added to allowlist!")

    for voter in voters:
        is_voter, _ = voting.functions.getVoterData(voter).call()
        print(f"Is voter ({voter}): {is_voter}")


if __name__ == "__main__":
    main()
