from typing import Iterable

import eth_utils as eth

from rewarder.errors import EmptyTreeError, MissingLeafError
from rewarder.merkle.hashing import to_hex
from rewarder.models.types import HexStr


def hash_pair(a: bytes, b: bytes) -> bytes:
    """Hash two nodes in ascending order, matching OpenZeppelin's MerkleProof"""
    if b < a:
        a, b = b, a
    return eth.keccak(a + b)


class MerkleTree:
    """
    Binary merkle tree over sorted leaves with sorted pair hashing.

    Leaves are expected to be hashed already. A node without a sibling is
    carried up to the next layer as is, so a tree of one leaf has that leaf
    as its root and an empty proof.
    """

    def __init__(self, leaves: Iterable[bytes]):
        self.leaves: list[bytes] = sorted(leaves)
        if not self.leaves:
            raise EmptyTreeError("No leaves to build tree")
        self._positions = {leaf: i for i, leaf in enumerate(self.leaves)}
        self.layers: list[list[bytes]] = self._build_layers(self.leaves)

    @staticmethod
    def _next_layer(layer: list[bytes]) -> list[bytes]:
        nxt = []
        for i in range(0, len(layer), 2):
            if i + 1 < len(layer):
                nxt.append(hash_pair(layer[i], layer[i + 1]))
            else:
                nxt.append(layer[i])
        return nxt

    def _build_layers(self, leaves: list[bytes]) -> list[list[bytes]]:
        layers = [leaves]
        while len(layers[-1]) > 1:
            layers.append(self._next_layer(layers[-1]))
        return layers

    @property
    def root(self) -> bytes:
        return self.layers[-1][0]

    @property
    def hex_root(self) -> HexStr:
        return to_hex(self.root)

    @property
    def depth(self) -> int:
        return len(self.layers) - 1

    def get_proof(self, leaf: bytes) -> list[bytes]:
        """Sibling hashes from the leaf up to (but excluding) the root"""
        if leaf not in self._positions:
            raise MissingLeafError(f"Leaf {to_hex(leaf)} is not in the tree")

        index = self._positions[leaf]
        proof = []
        for layer in self.layers[:-1]:
            sibling = index ^ 1
            if sibling < len(layer):
                proof.append(layer[sibling])
            index //= 2
        return proof

    def get_hex_proof(self, leaf: bytes) -> list[HexStr]:
        return [to_hex(p) for p in self.get_proof(leaf)]
