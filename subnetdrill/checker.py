"""
Answer checking for SubnetDrill.
"""

from dataclasses import dataclass, fields
from typing import Mapping, Optional

from .core import SubnetInfo, format_address, normalize_address_text, normalize_prefix_text

FIELD_LABELS = {
    "mask": "Mask",
    "cidr": "CIDR",
    "network": "Network ID",
    "broadcast": "Broadcast",
    "gateway": "First usable (Gateway)",
    "last": "Last usable",
}


@dataclass
class FieldSet:
    """The six answer fields a student fills in for one subnet."""

    mask: str = ""
    cidr: str = ""
    network: str = ""
    broadcast: str = ""
    gateway: str = ""
    last: str = ""

    @classmethod
    def from_mapping(cls, values: Mapping[str, Optional[str]]) -> "FieldSet":
        """Build from a dict keyed by field name; missing or None values become empty."""
        kwargs = {}
        for f in fields(cls):
            value = values.get(f.name)
            kwargs[f.name] = "" if value is None else str(value)
        return cls(**kwargs)


def _address_matches(text: str, expected: int) -> bool:
    return normalize_address_text(text) == expected


def check_subnet(expected: SubnetInfo, submitted: FieldSet) -> bool:
    """
    Check every field of a submitted answer against the expected subnet.

    Addresses and the mask may be written in dot-decimal or dot-binary
    notation; the CIDR may carry a leading "/". Unparsable text counts as
    wrong. Returns True only if all six fields are correct.
    """
    return (
        _address_matches(submitted.mask, expected.mask)
        and normalize_prefix_text(submitted.cidr) == expected.prefix
        and _address_matches(submitted.network, expected.network)
        and _address_matches(submitted.broadcast, expected.broadcast)
        and _address_matches(submitted.gateway, expected.gateway)
        and _address_matches(submitted.last, expected.last_usable)
    )


def explain_subnet(expected: SubnetInfo, hosts: int) -> str:
    """Correct values and solving steps for one subnet."""
    return "\n".join([
        "Correct values:",
        f"  {FIELD_LABELS['mask']}: {format_address(expected.mask)}",
        f"  {FIELD_LABELS['cidr']}: /{expected.prefix}",
        f"  {FIELD_LABELS['network']}: {format_address(expected.network)}",
        f"  {FIELD_LABELS['broadcast']}: {format_address(expected.broadcast)}",
        f"  {FIELD_LABELS['gateway']}: {format_address(expected.gateway)}",
        f"  {FIELD_LABELS['last']}: {format_address(expected.last_usable)}",
        "",
        "Solve method:",
        f"  1) Choose the smallest prefix that supports {hosts} hosts.",
        "  2) Allocate largest requirements first (VLSM).",
        f"  3) Block size = {expected.block_size} addresses.",
    ])
