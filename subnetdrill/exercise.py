"""
VLSM exercise generation for SubnetDrill.

A puzzle is an assigned private block plus a list of host requirements,
solved by packing one subnet per requirement, largest first.
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from . import config
from .core import MAX_ADDRESS, Block, SubnetInfo, block_size, hosts_to_prefix, subnet_info

logger = logging.getLogger(__name__)

DIFFICULTIES = ("easy", "medium", "hard")

# RFC 1918 private address spaces
POOLS = (
    Block(0x0A000000, 8),    # 10.0.0.0/8
    Block(0xAC100000, 12),   # 172.16.0.0/12
    Block(0xC0A80000, 16),   # 192.168.0.0/16
)

MEDIUM_MAX_HOSTS = 4094


class CapacityOverflow(ValueError):
    """The requested subnets do not fit in the base block."""

    def __init__(self, required: int, available: int):
        super().__init__(
            f"Requirements need {required} addresses but only {available} are available"
        )
        self.required = required
        self.available = available


class GenerationExhausted(RuntimeError):
    """Every regeneration attempt overflowed the base block."""

    def __init__(self, difficulty: str, attempts: int):
        super().__init__(
            f"Could not generate a valid {difficulty} exercise after {attempts} attempts"
        )
        self.difficulty = difficulty
        self.attempts = attempts


def _check_difficulty(difficulty: str) -> None:
    if difficulty not in DIFFICULTIES:
        raise ValueError(
            f"Unknown difficulty {difficulty!r}, expected one of {', '.join(DIFFICULTIES)}"
        )


# Pool allocation

def pick_assigned_prefix(difficulty: str, rng: random.Random) -> int:
    """Choose the prefix of the assigned block for a difficulty."""
    _check_difficulty(difficulty)
    if difficulty == "medium":
        roll = rng.random()
        if roll < 0.60:
            return 24
        if roll < 0.90:
            return 16
        return 8
    return rng.choice((24, 16, 8))


def pick_assigned_block(target_prefix: int, rng: random.Random) -> Block:
    """
    Pick a random aligned block of ``target_prefix`` inside a private pool.

    A pool is eligible when it is at least as large as the target block. The
    sub-block index is uniform over every aligned position in the pool.
    """
    pools = [pool for pool in POOLS if pool.prefix <= target_prefix]
    if not pools:
        raise ValueError(f"No private pool can hold a /{target_prefix} block")

    pool = rng.choice(pools)
    if pool.prefix == target_prefix:
        return pool

    target_size = block_size(target_prefix)
    blocks_in_pool = pool.size // target_size
    index = rng.randint(0, blocks_in_pool - 1)
    return Block(pool.network + index * target_size, target_prefix)


# Host requirement generators

def _max_hosts_by_base(base_prefix: int) -> int:
    if base_prefix >= 24:
        return 200
    if base_prefix >= 16:
        return 2000
    return 8000


def generate_hosts_easy(base_prefix: int, rng: random.Random) -> List[int]:
    """A single requirement of 10 up to 400 hosts, capped by the base size."""
    return [rng.randint(10, min(400, _max_hosts_by_base(base_prefix)))]


def generate_hosts_medium(base_prefix: int, count: int, rng: random.Random) -> List[int]:
    """
    ``count`` identical requirements.

    The host count is drawn from 35%-75% of the usable size of the subnet
    you would get by splitting the base block ``count`` ways, with that
    subnet clamped to /20../30 and capped at 4094 hosts.
    """
    if count < 1:
        raise ValueError(f"Subnet count must be positive, got {count}")

    min_subnet_prefix = min(30, base_prefix + (count - 1).bit_length())
    subnet_prefix = max(min_subnet_prefix, 20)
    usable = block_size(subnet_prefix) - 2

    cap = min(usable, MEDIUM_MAX_HOSTS)
    floor = max(30, int(cap * 0.35))
    ceil = max(floor, int(cap * 0.75))
    hosts = rng.randint(floor, ceil)
    return [hosts] * count


def generate_hosts_hard(base_prefix: int, count: int, rng: random.Random) -> List[int]:
    """
    ``count`` independent requirements from a tiered mixture.

    45% small (2-60), 40% medium (61-300), 15% large (301 up to the base cap).
    """
    if count < 1:
        raise ValueError(f"Subnet count must be positive, got {count}")

    max_hosts = _max_hosts_by_base(base_prefix)
    hosts = []
    for _ in range(count):
        roll = rng.random()
        if roll < 0.45:
            h = rng.randint(2, 60)
        elif roll < 0.85:
            h = rng.randint(61, min(300, max_hosts))
        else:
            # small bases cap below 301; the large tier then collapses onto the cap
            h = rng.randint(min(301, max_hosts), max_hosts)
        hosts.append(h)
    return hosts


def generate_requirements(difficulty: str, base_prefix: int, count: int,
                          rng: random.Random) -> List[int]:
    """Generate host requirements for a difficulty, sorted largest first."""
    _check_difficulty(difficulty)
    if difficulty == "easy":
        hosts = generate_hosts_easy(base_prefix, rng)
    elif difficulty == "medium":
        hosts = generate_hosts_medium(base_prefix, count, rng)
    else:
        hosts = generate_hosts_hard(base_prefix, count, rng)
    return sorted(hosts, reverse=True)


# VLSM packing

def required_prefixes(requirements: Sequence[int]) -> Tuple[List[int], int]:
    """Prefix for each requirement and the total addresses they occupy."""
    prefixes = [hosts_to_prefix(h) for h in requirements]
    return prefixes, sum(block_size(p) for p in prefixes)


def pack(base: Block, requirements: Sequence[int]) -> List[SubnetInfo]:
    """
    Pack one subnet per requirement into ``base``, in the given order.

    Each subnet starts at the cursor rounded up to a multiple of its own
    block size; the cursor then moves past it. Requirements are not
    reordered, so callers pass them largest first.

    Raises:
        CapacityOverflow: if the blocks do not fit inside ``base``.
    """
    prefixes, total = required_prefixes(requirements)
    if total > base.size:
        raise CapacityOverflow(total, base.size)

    allocations = []
    cursor = base.network
    for prefix in prefixes:
        size = block_size(prefix)
        cursor = -(-cursor // size) * size
        end = cursor + size - 1
        if end > base.broadcast or end > MAX_ADDRESS:
            raise CapacityOverflow(end - base.network + 1, base.size)
        allocations.append(subnet_info(cursor, prefix))
        cursor += size
    return allocations


@dataclass(frozen=True)
class Puzzle:
    """An assigned block, its requirements (largest first) and the solution."""

    difficulty: str
    base: Block
    requirements: Tuple[int, ...]
    allocations: Tuple[SubnetInfo, ...]

    def describe(self) -> str:
        """Question text shown to the student."""
        lines = [
            f"Assigned block: {self.base}",
            "Requirements (largest first):",
        ]
        for i, hosts in enumerate(self.requirements, start=1):
            lines.append(f"  Subnet {i}: {hosts} hosts")
        if self.difficulty == "hard":
            lines.append("In VLSM, allocate address space from the largest requirement downward.")
        return "\n".join(lines)

    def to_dict(self) -> Dict:
        return {
            "difficulty": self.difficulty,
            "network": str(self.base),
            "hosts_per_subnet": list(self.requirements),
            "subnets": [
                dict(info.to_dict(), hosts_requested=hosts)
                for hosts, info in zip(self.requirements, self.allocations)
            ],
        }


def generate_puzzle(difficulty: str, rng: Optional[random.Random] = None,
                    max_attempts: Optional[int] = None) -> Puzzle:
    """
    Generate a VLSM puzzle for ``difficulty`` ("easy", "medium" or "hard").

    The assigned block and subnet count are chosen once; only the host
    requirements are regenerated when they overflow the block.

    Raises:
        GenerationExhausted: if ``max_attempts`` requirement sets all overflow.
    """
    _check_difficulty(difficulty)
    if rng is None:
        rng = random.Random()
    if max_attempts is None:
        max_attempts = config.MAX_GENERATION_ATTEMPTS

    base = pick_assigned_block(pick_assigned_prefix(difficulty, rng), rng)
    count = 1 if difficulty == "easy" else rng.randint(2, 5)

    for attempt in range(1, max_attempts + 1):
        requirements = generate_requirements(difficulty, base.prefix, count, rng)
        try:
            allocations = pack(base, requirements)
        except CapacityOverflow as e:
            logger.debug(f"Attempt {attempt} for {base}: {e}")
            continue

        puzzle = Puzzle(difficulty, base, tuple(requirements), tuple(allocations))
        logger.info(f"Generated {difficulty} exercise {base} with hosts {requirements}")
        return puzzle

    logger.error(f"Exhausted {max_attempts} attempts generating {difficulty} exercise for {base}")
    raise GenerationExhausted(difficulty, max_attempts)
