import os

from tinydb import TinyDB

from rewarder.models.Claim import ClaimProofMapping
from rewarder.models.Config import Config
from rewarder.models.types import HexStr


class DB(TinyDB):
    """Keeps a record of the latest tree generated for a rewarder deployment, unless opened with `drop=False`"""

    config: Config

    def __init__(self, conf: Config, drop=False, **kwargs):
        self.config = conf
        path = f"{conf.output}/{conf.chainId}/rewarder-db.json"

        # check if the directory exists
        create_dirs = self.exists(path) == False
        super().__init__(
            path,
            indent=4,
            create_dirs=create_dirs,
            **kwargs,
        )

        if drop:
            self.drop_tables()

    @staticmethod
    def exists(path: str):
        return os.path.exists(path)

    def write_tree(self, root: HexStr, mapping: ClaimProofMapping) -> None:
        total = sum(int(proofs[-1].claimData.amount) for proofs in mapping.values())
        self.table("tree").insert(
            {
                "root": root,
                "rewarder": self.config.rewarder,
                "chainId": self.config.chainId,
                "claimants": len(mapping),
                "leaves": sum(len(proofs) for proofs in mapping.values()),
                # BigNumber
                "total": str(total),
            }
        )

    def write_claims(self, mapping: ClaimProofMapping) -> None:
        self.table("claims").insert_multiple(
            [
                {"address": address, **proof.model_dump()}
                for address, proofs in mapping.items()
                for proof in proofs
            ]
        )

    def write_tree_and_claims(self, root: HexStr, mapping: ClaimProofMapping) -> None:
        self.write_tree(root, mapping)
        self.write_claims(mapping)
