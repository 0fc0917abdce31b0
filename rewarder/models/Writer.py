import csv
import json
from dataclasses import dataclass
from pathlib import Path

from rewarder.models.Claim import ClaimProofMapping, serialize_proofs
from rewarder.models.Config import Config
from rewarder.models.types import HexStr

ROOT_FILE = "merkle_root.txt"
PROOFS_FILE = "claim_proofs.json"
CLAIMS_FILE = "claims.csv"


@dataclass
class Writer:
    config: Config

    @property
    def path(self) -> str:
        return f"{self.config.output}/{self.config.chainId}"

    @property
    def root_path(self) -> str:
        return f"{self.path}/{ROOT_FILE}"

    @property
    def proofs_path(self) -> str:
        return f"{self.path}/{PROOFS_FILE}"

    @property
    def claims_path(self) -> str:
        return f"{self.path}/{CLAIMS_FILE}"

    @staticmethod
    def flatten_proofs(mapping: ClaimProofMapping) -> list[dict]:
        """One row per accrued claim, proofs left out"""
        return [
            {
                "address": address,
                "amount": proof.claimData.amount,
                "unlocksAt": proof.claimData.unlocksAt,
            }
            for address, proofs in mapping.items()
            for proof in proofs
        ]

    @staticmethod
    def write_csv(data: list[dict], path: str, fieldnames: list[str]) -> None:
        with open(path, "w+", newline="") as f:
            writer = csv.DictWriter(f, delimiter=",", fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(data)

    # create the output directory for this chain if it doesn't exist
    def _create_dir(self) -> None:
        Path(self.path).mkdir(parents=True, exist_ok=True)

    def exists(self) -> bool:
        return Path(self.root_path).exists()

    # the root is written bare, without a trailing newline
    def write_root(self, root: HexStr) -> None:
        self._create_dir()
        with open(self.root_path, "w") as f:
            f.write(root)

    def write_proofs(self, mapping: ClaimProofMapping) -> None:
        self._create_dir()
        with open(self.proofs_path, "w") as f:
            json.dump(serialize_proofs(mapping), f, indent=4)

    def write_claims(self, mapping: ClaimProofMapping) -> None:
        self._create_dir()
        self.write_csv(
            self.flatten_proofs(mapping),
            self.claims_path,
            ["address", "amount", "unlocksAt"],
        )

    # the root goes last, `exists` only sees complete outputs
    def write_all(self, root: HexStr, mapping: ClaimProofMapping) -> None:
        self.write_proofs(mapping)
        self.write_claims(mapping)
        self.write_root(root)
