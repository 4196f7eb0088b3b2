"""
Tools for SubnetDrill.
"""

import json
import random

from .checker import FieldSet, check_subnet
from .core import Block, SubnetInfo, address_to_binary, format_address, parse_address
from .exercise import generate_puzzle


def generate_vlsm_exercise(difficulty: str = "medium", seed: str = "") -> str:
    """
    Generate a random VLSM subnetting exercise with its solution.

    Args:
        difficulty (str): "easy", "medium" or "hard"
        seed (str): Optional integer seed to reproduce an exercise

    Returns:
        str: Exercise in JSON format with the assigned network, host
             requirements (largest first) and the solved subnets
    """
    try:
        seed_str = seed.strip()
        rng = random.Random(int(seed_str)) if seed_str else random.Random()

        puzzle = generate_puzzle(difficulty.strip().lower(), rng)
        result = puzzle.to_dict()
        result["question"] = puzzle.describe()
        return json.dumps(result, indent=2)
    except Exception as e:
        return json.dumps({"error": str(e)}, indent=2)


def check_subnet_answer(subnet: str, mask: str, cidr: str, network: str,
                        broadcast: str, gateway: str, last: str) -> str:
    """
    Check a student's answer for one subnet.

    Args:
        subnet (str): The correct subnet in CIDR format (e.g., "192.168.1.64/27")
        mask (str): Answered subnet mask, decimal or binary
        cidr (str): Answered prefix (e.g., "/27" or "27")
        network (str): Answered network ID
        broadcast (str): Answered broadcast address
        gateway (str): Answered first usable address
        last (str): Answered last usable address

    Returns:
        str: JSON with "correct" and the expected values
    """
    try:
        expected = SubnetInfo.from_block(Block.parse(subnet))
        submitted = FieldSet(mask, cidr, network, broadcast, gateway, last)
        return json.dumps({
            "correct": check_subnet(expected, submitted),
            "expected": expected.to_dict()
        }, indent=2)
    except Exception as e:
        return json.dumps({"error": str(e)}, indent=2)


def convert_address(address: str) -> str:
    """
    Show an IPv4 address in both decimal and binary notation.

    Args:
        address (str): IP address in decimal (192.168.1.10) or binary format

    Returns:
        str: JSON with "decimal" and "binary" forms
    """
    try:
        value = parse_address(address)
        return json.dumps({
            "decimal": format_address(value),
            "binary": address_to_binary(value)
        }, indent=2)
    except Exception as e:
        return json.dumps({"error": str(e)}, indent=2)
