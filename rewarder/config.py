import os
from pathlib import Path

from rewarder import utils
from rewarder.env import DEFAULT_OUTPUT, ENV_KEYS, env_var
from rewarder.models import Config

CONF_FILE = "rewarder-conf.json"


def load_conf(config_path: str) -> Config:
    """Loads an existing config from a json file"""
    with open(config_path) as f:
        return Config.model_validate_json(f.read())


def conf_from_env() -> Config:
    """Builds the config from environment variables, `.env` is loaded on import"""
    return Config(
        claims=env_var(ENV_KEYS.CLAIMS_CSV),
        rewarder=env_var(ENV_KEYS.REWARDER_ADDRESS),
        chainId=int(env_var(ENV_KEYS.CHAIN_ID)),
        output=env_var(ENV_KEYS.OUTPUT, DEFAULT_OUTPUT),
    )


def has_env_conf() -> bool:
    return all(
        os.environ.get(key)
        for key in (ENV_KEYS.CLAIMS_CSV, ENV_KEYS.REWARDER_ADDRESS, ENV_KEYS.CHAIN_ID)
    )


def create_conf() -> Config:
    """Generates the config object from user input"""
    claims = input("📄 Path to the claims csv ")
    rewarder = input("🏦 Deployed rewarder address ")
    chain_id = int(input("🔗 Chain id of the rewarder "))
    output = input(f"📁 Output folder [{DEFAULT_OUTPUT}] ") or DEFAULT_OUTPUT

    return Config(claims=claims, rewarder=rewarder, chainId=chain_id, output=output)


def save_conf(conf: Config) -> str:
    """Saves the config next to the outputs so the run can be repeated with `load_conf`"""
    path = f"{conf.output}/{conf.chainId}"
    Path(path).mkdir(parents=True, exist_ok=True)
    utils.write_json(conf.model_dump(), f"{path}/{CONF_FILE}")
    return f"{path}/{CONF_FILE}"
