import json
import os

import pytest

from rewarder.merkle import build
from rewarder.models import Config, Writer


@pytest.fixture
def config(tmp_path, REWARDER, CHAIN_ID) -> Config:
    return Config(
        claims="claims.csv", rewarder=REWARDER, chainId=CHAIN_ID, output=str(tmp_path)
    )


@pytest.fixture
def writer(config):
    return Writer(config)


@pytest.fixture
def tree(ADDRESSES, REWARDER, CHAIN_ID):
    return build(
        [
            {"address": ADDRESSES[0], "amount": 100, "unlocksAt": 100},
            {"address": ADDRESSES[0], "amount": 50, "unlocksAt": 200},
            {"address": ADDRESSES[1], "amount": 10**30, "unlocksAt": 100},
        ],
        CHAIN_ID,
        REWARDER,
    )


def test_paths(writer, config, tmp_path):
    assert writer.path == f"{tmp_path}/{config.chainId}"
    assert writer.root_path.endswith("/merkle_root.txt")
    assert writer.proofs_path.endswith("/claim_proofs.json")


def test_write_root(writer, tree):
    root, _ = tree

    assert not writer.exists()
    writer.write_root(root)

    assert writer.exists()
    with open(writer.root_path) as f:
        contents = f.read()
    assert contents == root
    assert len(contents) == 66


def test_write_proofs(writer, tree, ADDRESSES):
    _, mapping = tree
    writer.write_proofs(mapping)

    with open(writer.proofs_path) as f:
        proofs = json.load(f)

    assert list(proofs.keys()) == sorted(a.lower() for a in ADDRESSES[:2])
    entries = proofs[ADDRESSES[0].lower()]
    assert [e["claimData"] for e in entries] == [
        {"amount": "100", "unlocksAt": 100},
        {"amount": "150", "unlocksAt": 200},
    ]
    assert all(p.startswith("0x") and len(p) == 66 for e in entries for p in e["merkleProof"])


def test_write_claims(writer, tree, ADDRESSES):
    _, mapping = tree
    writer.write_claims(mapping)

    with open(writer.claims_path) as f:
        lines = f.read().splitlines()

    assert lines[0] == "address,amount,unlocksAt"
    assert f"{ADDRESSES[0].lower()},150,200" in lines
    assert f"{ADDRESSES[1].lower()},{10**30},100" in lines
    assert len(lines) == 4


def test_write_all_creates_dirs(writer, tree):
    writer.write_all(*tree)

    assert os.path.exists(writer.root_path)
    assert os.path.exists(writer.proofs_path)
    assert os.path.exists(writer.claims_path)


def test_root_is_written_last(monkeypatch, writer, tree):
    def fail_claims(mapping):
        raise OSError("disk full")

    monkeypatch.setattr(writer, "write_claims", fail_claims)

    with pytest.raises(OSError):
        writer.write_all(*tree)

    assert os.path.exists(writer.proofs_path)
    assert not writer.exists()
