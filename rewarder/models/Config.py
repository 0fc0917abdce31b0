from pydantic import BaseModel, field_validator

from rewarder.env import DEFAULT_OUTPUT
from rewarder.errors import BadConfigException
from rewarder.merkle.hashing import UINT256_MAX, normalize_address
from rewarder.models.types import EthereumAddress


class Config(BaseModel):
    """
    Everything needed to generate a tree for one rewarder deployment
    :param `claims`: path to the csv file of claims
    :param `rewarder`: address of the deployed rewarder, mixed into every leaf
    :param `chainId`: chain the rewarder is deployed on, mixed into every leaf
    :param `output`: base directory, files are written to `{output}/{chainId}/`
    """

    claims: str
    rewarder: EthereumAddress
    chainId: int
    output: str = DEFAULT_OUTPUT

    @field_validator("rewarder")
    @classmethod
    def normalize_rewarder(cls, rewarder: str) -> str:
        return normalize_address(rewarder)

    @field_validator("chainId")
    @classmethod
    def validate_chain_id(cls, chain_id: int) -> int:
        if chain_id < 0 or chain_id > UINT256_MAX:
            raise BadConfigException(f"Chain id out of range: {chain_id}")
        return chain_id

    @field_validator("claims")
    @classmethod
    def validate_claims_path(cls, claims: str) -> str:
        if not claims.strip():
            raise BadConfigException("Must provide a path to the claims csv")
        return claims
