from typing import Literal

# type aliases for clarity
EthereumAddress = str
BigNumber = str
HexStr = str
ClaimsCSVColumn = Literal["address", "amount", "unlocksAt"]
