class InvalidAddressError(Exception):
    """Raise if a claimant or rewarder address is not a 20 byte hex string"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"{value} is not a valid address")


class DuplicateUnlockPeriodError(Exception):
    """Raise if a claimant has two claims unlocking at the same time"""

    def __init__(self, address: str, unlocks_at: int):
        self.address = address
        self.unlocks_at = unlocks_at
        super().__init__(
            f"Duplicate unlock period {unlocks_at} for address {address}"
        )


class EncodingOverflowError(Exception):
    """Raise if a value does not fit in a uint256 word"""

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"{field} out of uint256 range: {value}")


class EmptyTreeError(Exception):
    """Raise if a tree is built with no leaves"""

    pass


class MissingLeafError(Exception):
    """Raise if a proof is requested for a leaf that is not in the tree"""

    pass


class MalformedClaimsFileError(Exception):
    pass


class BadConfigException(Exception):
    pass


class MissingEnvironmentVariableException(Exception):
    pass
