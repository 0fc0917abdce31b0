import sys

from rewarder import utils
from rewarder.config import conf_from_env, create_conf, has_env_conf, load_conf, save_conf
from rewarder.merkle import build_rewards_tree
from rewarder.models import DB, Config, HexStr, Writer
from rewarder.parser import read_claims_csv


def generate_tree_output(conf: Config, drop: bool = True) -> HexStr:
    """
    Builds the tree for the claims in `conf.claims` and writes:
        - `{output}/{chainId}/merkle_root.txt`
        - `{output}/{chainId}/claim_proofs.json`
        - `{output}/{chainId}/claims.csv`
    Nothing is written if the claims are invalid.
    """
    print(f"📄 Loading claims from {conf.claims}...")
    claims = read_claims_csv(conf.claims)

    tree, mapping = build_rewards_tree(claims, conf.chainId, conf.rewarder)
    root = tree.hex_root
    print(
        f"🌳 Built tree with {len(tree.leaves)} leaves for {len(mapping)} claimants, root {root}"
    )

    writer = Writer(conf)
    writer.write_all(root, mapping)

    with DB(conf, drop=drop) as db:
        db.write_tree_and_claims(root, mapping)

    print(
        f"🚀🚀🚀 Successfully wrote {writer.root_path} and {writer.proofs_path}, set the root on the rewarder"
    )
    return root


def get_conf() -> Config:
    if len(sys.argv) > 1:
        return load_conf(sys.argv[1])

    path = input(" Path to the config file (leave empty to use the environment) ")
    if path:
        return load_conf(path)
    if has_env_conf():
        return conf_from_env()

    conf = create_conf()
    print(f"😃 Saved config to {save_conf(conf)}")
    return conf


def main() -> None:
    conf = get_conf()
    writer = Writer(conf)
    if writer.exists() and not utils.yes_or_no(
        f"A tree already exists in {writer.path}, overwrite it?"
    ):
        print("🛑 Leaving the existing tree in place")
        return
    generate_tree_output(conf)


if __name__ == "__main__":
    main()
