import eth_utils as eth
import pytest

from rewarder.merkle import hash_pair


@pytest.fixture()
def ADDRESSES():
    return [
        "0x9bc33f6155eFAcc290c3C50E9B5b24b668562732",
        "0xfDe38ad4bBbeC867e6cb4Bb31FbFB2074c959A83",
        "0x8BB4C0b502f869af3B25166930507a6E8c3038D4",
        "0x7Ac54A0406FA2B465E0D57C66597BE83A4b149fC",
        "0xdeA708968f8dd520f5e2F0aB6785F28c98521ca8",
    ]


@pytest.fixture
def REWARDER() -> str:
    return "0xc1793d2f79C45b6564cD54DdBFb1b3fCf732238a"


@pytest.fixture
def CHAIN_ID() -> int:
    return 31337


def process_proof(leaf: bytes, proof: list[str]) -> bytes:
    """Rebuild the root the same way the rewarder's MerkleProof.verify does"""
    computed = leaf
    for sibling in proof:
        computed = hash_pair(computed, eth.decode_hex(sibling))
    return computed


@pytest.fixture
def verify_proof():
    def verify(root: str, leaf: bytes, proof: list[str]) -> bool:
        return eth.encode_hex(process_proof(leaf, proof)) == root

    return verify
