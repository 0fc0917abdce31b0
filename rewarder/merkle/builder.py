import itertools
from collections import defaultdict
from typing import Iterable, Mapping, Union

from rewarder.errors import DuplicateUnlockPeriodError
from rewarder.merkle.hashing import check_uint256, construct_hash, normalize_address
from rewarder.merkle.tree import MerkleTree
from rewarder.models import (
    AccruedClaim,
    ClaimInput,
    ClaimProof,
    ClaimProofMapping,
    EthereumAddress,
    HexStr,
)

RawClaim = Union[ClaimInput, Mapping]


def parse_claims(claims: Iterable[RawClaim]) -> list[ClaimInput]:
    """
    Accept either `ClaimInput` objects or dicts with the same keys.
    Raw addresses are checked before any dict is parsed into a model.
    """
    raw = list(claims)
    for c in raw:
        if not isinstance(c, ClaimInput):
            normalize_address(c.get("address"))
    return [c if isinstance(c, ClaimInput) else ClaimInput(**c) for c in raw]


def validate_claims(claims: list[ClaimInput]) -> list[ClaimInput]:
    """
    Lowercase every address and range check amounts and timestamps.
    All addresses are checked before any amount so a bad address is always reported first.
    """
    normalized = [
        c.model_copy(update={"address": normalize_address(c.address)}) for c in claims
    ]
    for claim in normalized:
        check_uint256("amount", claim.amount)
        check_uint256("unlocksAt", claim.unlocksAt)
    return normalized


def group_claims(
    claims: list[ClaimInput],
) -> dict[EthereumAddress, list[ClaimInput]]:
    """
    Partition normalized claims by address, each group sorted by unlock time.
    Groups are returned in ascending address order.
    """
    groups: dict[EthereumAddress, list[ClaimInput]] = defaultdict(list)
    for claim in claims:
        groups[claim.address].append(claim)

    for address, group in groups.items():
        seen: set[int] = set()
        for claim in group:
            if claim.unlocksAt in seen:
                raise DuplicateUnlockPeriodError(address, claim.unlocksAt)
            seen.add(claim.unlocksAt)

    return {
        address: sorted(groups[address], key=lambda c: c.unlocksAt)
        for address in sorted(groups)
    }


def accrue(group: list[ClaimInput]) -> list[AccruedClaim]:
    """
    Turn one claimant's claims into cumulative entitlements.
    The claim unlocking at `t` is worth everything unlocking at or before `t`,
    the rewarder pays out the difference to what was already claimed.
    """
    ordered = sorted(group, key=lambda c: c.unlocksAt)
    totals = itertools.accumulate(c.amount for c in ordered)
    return [
        AccruedClaim(address=c.address, amount=total, unlocksAt=c.unlocksAt)
        for c, total in zip(ordered, totals)
    ]


def build_rewards_tree(
    claims: Iterable[RawClaim], chain_id: int, rewarder: EthereumAddress
) -> tuple[MerkleTree, ClaimProofMapping]:
    """
    Validate, accrue and hash a batch of claims, then build the tree and proofs.
    Nothing is returned unless the whole batch is valid.

    :param `claims`: raw claims, any order, addresses in any casing
    :param `chain_id`: chain id of the rewarder deployment
    :param `rewarder`: address of the rewarder contract
    """
    rewarder = normalize_address(rewarder)
    inputs = validate_claims(parse_claims(claims))
    check_uint256("chainId", chain_id)

    hashed: dict[EthereumAddress, list[tuple[AccruedClaim, bytes]]] = {
        address: [
            (
                claim,
                construct_hash(
                    rewarder, address, chain_id, claim.amount, claim.unlocksAt
                ),
            )
            for claim in accrue(group)
        ]
        for address, group in group_claims(inputs).items()
    }

    tree = MerkleTree(leaf for entries in hashed.values() for _, leaf in entries)

    mapping: ClaimProofMapping = {
        address: [
            ClaimProof(claimData=claim.claim_data(), merkleProof=tree.get_hex_proof(leaf))
            for claim, leaf in entries
        ]
        for address, entries in hashed.items()
    }
    return tree, mapping


def build(
    claims: Iterable[RawClaim], chain_id: int, rewarder: EthereumAddress
) -> tuple[HexStr, ClaimProofMapping]:
    """Same as `build_rewards_tree` but returns the hex root instead of the tree"""
    tree, mapping = build_rewards_tree(claims, chain_id, rewarder)
    return tree.hex_root, mapping
