import os
from typing import Optional

from dotenv import load_dotenv

from rewarder.errors import MissingEnvironmentVariableException

load_dotenv()


def env_var(accessor: str, default: Optional[str] = None) -> str:
    """
    Attempt to fetch an environment variable and throw
    an error if not found and no default is given
    """
    var = os.environ.get(accessor, default)
    if not var:
        raise MissingEnvironmentVariableException(accessor)
    return var


class ENV_KEYS:
    CLAIMS_CSV = "CLAIMS_CSV"
    REWARDER_ADDRESS = "REWARDER_ADDRESS"
    CHAIN_ID = "CHAIN_ID"
    OUTPUT = "REWARDER_OUTPUT"


DEFAULT_OUTPUT = "output"
