"""
Core IPv4 arithmetic for SubnetDrill.

Addresses are plain ``int`` values in the unsigned 32-bit range. Text is only
produced and consumed at the edges (``parse_address`` / ``format_address``).
"""

import ipaddress
import re
from dataclasses import dataclass
from typing import Dict, Optional

MAX_ADDRESS = 0xFFFFFFFF

_DECIMAL_RE = re.compile(r"^([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})$")
_BINARY_RE = re.compile(r"^([01]{8})\.([01]{8})\.([01]{8})\.([01]{8})$")
_PREFIX_RE = re.compile(r"^/?\s*([0-9]{1,2})$")


class FormatError(ValueError):
    """Raised when address or prefix text cannot be parsed."""


def parse_address(text: str) -> int:
    """
    Parse a dotted IPv4 address into its 32-bit integer value.

    Accepts dot-decimal (``192.168.1.10``) and dot-binary
    (``11000000.10101000.00000001.00001010``) notation.

    Raises:
        FormatError: if the text matches neither notation or an octet is out of range.
    """
    if not isinstance(text, str):
        raise FormatError(f"Expected address text, got {type(text).__name__}")

    value = text.strip()
    match = _BINARY_RE.match(value)
    if match:
        octets = [int(o, 2) for o in match.groups()]
    else:
        match = _DECIMAL_RE.match(value)
        if not match:
            raise FormatError(f"Invalid IPv4 address: {text!r}")
        octets = [int(o) for o in match.groups()]
        if any(o > 255 for o in octets):
            raise FormatError(f"Octet out of range in {text!r}")

    address = 0
    for octet in octets:
        address = (address << 8) | octet
    return address


def format_address(address: int) -> str:
    """Format a 32-bit integer as a dot-decimal address."""
    if not 0 <= address <= MAX_ADDRESS:
        raise ValueError(f"Address out of 32-bit range: {address}")
    return str(ipaddress.IPv4Address(address))


def address_to_binary(address: int) -> str:
    """Format a 32-bit integer as dotted 8-bit binary octets."""
    if not 0 <= address <= MAX_ADDRESS:
        raise ValueError(f"Address out of 32-bit range: {address}")
    binary = format(address, '032b')
    return f"{binary[:8]}.{binary[8:16]}.{binary[16:24]}.{binary[24:]}"


def normalize_address_text(text: Optional[str]) -> Optional[int]:
    """Best-effort ``parse_address``; returns None instead of raising."""
    if text is None:
        return None
    try:
        return parse_address(text)
    except FormatError:
        return None


def parse_prefix(text: str) -> int:
    """Parse ``24`` or ``/24`` into a prefix length in [0, 32]."""
    if not isinstance(text, str):
        raise FormatError(f"Expected prefix text, got {type(text).__name__}")
    match = _PREFIX_RE.match(text.strip())
    if not match:
        raise FormatError(f"Invalid CIDR prefix: {text!r}")
    prefix = int(match.group(1))
    if prefix > 32:
        raise FormatError(f"CIDR prefix out of range: {text!r}")
    return prefix


def normalize_prefix_text(text: Optional[str]) -> Optional[int]:
    """Best-effort ``parse_prefix``; returns None instead of raising."""
    if text is None:
        return None
    try:
        return parse_prefix(text)
    except FormatError:
        return None


def _check_prefix(prefix: int) -> None:
    if not 0 <= prefix <= 32:
        raise ValueError(f"Prefix must be between 0 and 32, got {prefix}")


def mask_from_prefix(prefix: int) -> int:
    """Netmask with the top ``prefix`` bits set."""
    _check_prefix(prefix)
    if prefix == 0:
        return 0
    return (MAX_ADDRESS << (32 - prefix)) & MAX_ADDRESS


def block_size(prefix: int) -> int:
    """Number of addresses in a block of the given prefix."""
    _check_prefix(prefix)
    return 1 << (32 - prefix)


def hosts_to_prefix(hosts: int) -> int:
    """
    Smallest prefix whose block holds ``hosts`` usable addresses.

    A block of size S has S - 2 usable addresses, so this is
    ``32 - ceil(log2(hosts + 2))``. Computed with integer bit lengths to
    stay exact for every 32-bit size.
    """
    if hosts < 1:
        raise ValueError(f"Host count must be positive, got {hosts}")
    if hosts > MAX_ADDRESS - 1:
        raise ValueError(f"Host count does not fit in IPv4: {hosts}")
    # ceil(log2(n)) == (n - 1).bit_length() for n >= 1
    return 32 - (hosts + 1).bit_length()


@dataclass(frozen=True)
class Block:
    """An aligned (network, prefix) address block."""

    network: int
    prefix: int

    def __post_init__(self):
        _check_prefix(self.prefix)
        if not 0 <= self.network <= MAX_ADDRESS:
            raise ValueError(f"Address out of 32-bit range: {self.network}")
        if self.network % block_size(self.prefix):
            raise ValueError(
                f"{format_address(self.network)} is not aligned to /{self.prefix}"
            )

    @classmethod
    def parse(cls, text: str) -> "Block":
        """Parse ``a.b.c.d/p`` notation; the address must be the network address."""
        address, sep, prefix = text.strip().partition('/')
        if not sep:
            raise FormatError(f"Expected CIDR notation, got {text!r}")
        return cls(parse_address(address), parse_prefix(prefix))

    @property
    def size(self) -> int:
        return block_size(self.prefix)

    @property
    def broadcast(self) -> int:
        return self.network + self.size - 1

    @property
    def mask(self) -> int:
        return mask_from_prefix(self.prefix)

    def contains(self, other: "Block") -> bool:
        return self.network <= other.network and other.broadcast <= self.broadcast

    def overlaps(self, other: "Block") -> bool:
        return self.network <= other.broadcast and other.network <= self.broadcast

    def __str__(self) -> str:
        return f"{format_address(self.network)}/{self.prefix}"


@dataclass(frozen=True)
class SubnetInfo:
    """
    Read-only view of an allocated subnet.

    ``gateway`` is the first usable address and ``last_usable`` the last one.
    Both are only meaningful for prefixes up to /30.
    """

    prefix: int
    mask: int
    network: int
    broadcast: int
    gateway: int
    last_usable: int
    block_size: int

    @classmethod
    def from_block(cls, block: Block) -> "SubnetInfo":
        size = block.size
        return cls(
            prefix=block.prefix,
            mask=block.mask,
            network=block.network,
            broadcast=block.broadcast,
            gateway=(block.network + 1) & MAX_ADDRESS,
            last_usable=(block.network + size - 2) & MAX_ADDRESS,
            block_size=size,
        )

    @property
    def block(self) -> Block:
        return Block(self.network, self.prefix)

    @property
    def usable_hosts(self) -> int:
        return max(self.block_size - 2, 0)

    def to_dict(self) -> Dict:
        return {
            "subnet": f"{format_address(self.network)}/{self.prefix}",
            "mask": format_address(self.mask),
            "cidr": f"/{self.prefix}",
            "network": format_address(self.network),
            "broadcast": format_address(self.broadcast),
            "gateway": format_address(self.gateway),
            "last": format_address(self.last_usable),
            "block_size": self.block_size,
            "usable_hosts": self.usable_hosts,
        }


def subnet_info(network: int, prefix: int) -> SubnetInfo:
    """Build the SubnetInfo for an aligned network address."""
    return SubnetInfo.from_block(Block(network, prefix))
