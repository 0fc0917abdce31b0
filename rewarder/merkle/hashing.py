"""
Leaf hashing for the rewarder contract.

The contract rebuilds the leaf at claim time as

    keccak256(abi.encode(address(this), msg.sender, block.chainid, claim.amount, claim.unlocksAt))

so every field is a full 32 byte word and addresses are left padded.
The rewarder address and chain id bind each leaf to a single deployment.
"""
from typing import Any

import eth_utils as eth
from eth_abi import encode

from rewarder.errors import EncodingOverflowError, InvalidAddressError

UINT256_MAX = 2**256 - 1

LEAF_TYPES = ["address", "address", "uint256", "uint256", "uint256"]



def normalize_address(value: Any) -> str:
    """
    Validate a 0x prefixed, 20 byte hex address and return it lowercased.
    Checksums are not enforced, so checksummed and lowercase inputs map to the same key.
    """
    if not isinstance(value, str) or not value.startswith("0x"):
        raise InvalidAddressError(value)
    if not eth.is_hex_address(value):
        raise InvalidAddressError(value)
    return value.lower()


def check_uint256(field: str, value: Any) -> int:
    """Ensure `value` is an integer that fits in a single abi word"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingOverflowError(field, value)
    if value < 0 or value > UINT256_MAX:
        raise EncodingOverflowError(field, value)
    return value


def encode_claim(
    rewarder: str, address: str, chain_id: int, amount: int, unlocks_at: int
) -> bytes:
    return encode(
        LEAF_TYPES,
        [
            normalize_address(rewarder),
            normalize_address(address),
            check_uint256("chainId", chain_id),
            check_uint256("amount", amount),
            check_uint256("unlocksAt", unlocks_at),
        ],
    )


def construct_hash(
    rewarder: str, address: str, chain_id: int, amount: int, unlocks_at: int
) -> bytes:
    """
    Compute the 32 byte leaf for a single (accrued) claim
    :param `rewarder`: the rewarder contract address
    :param `address`: the claimant
    :param `chain_id`: chain the rewarder is deployed on
    :param `amount`: cumulative amount claimable once `unlocks_at` has passed
    :param `unlocks_at`: unix timestamp in seconds
    """
    return eth.keccak(encode_claim(rewarder, address, chain_id, amount, unlocks_at))


def to_hex(digest: bytes) -> str:
    return eth.encode_hex(digest)
