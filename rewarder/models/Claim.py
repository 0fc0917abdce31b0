from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from rewarder.errors import InvalidAddressError
from rewarder.models.types import BigNumber, EthereumAddress, HexStr


class ClaimInput(BaseModel):
    """
    A single row of the rewards input, before accrual
    :param `address`: claimant, any casing. Validated when the tree is built
    :param `amount`: tokens unlocked at this step, in wei
    :param `unlocksAt`: unix timestamp (seconds) after which the claim can be made
    """

    model_config = ConfigDict(frozen=True)

    address: EthereumAddress
    amount: int
    unlocksAt: int

    @field_validator("address", mode="before")
    @classmethod
    def ensure_text_address(cls, address):
        if not isinstance(address, str):
            raise InvalidAddressError(address)
        return address


class AccruedClaim(BaseModel):
    """
    A claim after accrual. `amount` is the running total of every input
    for the same (lowercased) address unlocking at or before `unlocksAt`
    """

    model_config = ConfigDict(frozen=True)

    address: EthereumAddress
    amount: int
    unlocksAt: int

    def claim_data(self) -> ClaimData:
        return ClaimData(amount=str(self.amount), unlocksAt=self.unlocksAt)


class ClaimData(BaseModel):
    """The struct passed to the rewarder's `claim` function"""

    model_config = ConfigDict(frozen=True)

    amount: BigNumber
    unlocksAt: int

    @field_validator("amount", mode="before")
    @classmethod
    def stringify_amount(cls, amount):
        if isinstance(amount, int):
            return str(amount)
        return amount


class ClaimProof(BaseModel):
    model_config = ConfigDict(frozen=True)

    claimData: ClaimData
    merkleProof: list[HexStr]


ClaimProofMapping = dict[EthereumAddress, list[ClaimProof]]


def serialize_proofs(mapping: ClaimProofMapping) -> dict[EthereumAddress, list[dict]]:
    """Convert the proof mapping to plain json-ready dicts"""
    return {
        address: [proof.model_dump() for proof in proofs]
        for address, proofs in mapping.items()
    }
