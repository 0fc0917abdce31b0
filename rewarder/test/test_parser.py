import pytest

from rewarder.errors import MalformedClaimsFileError
from rewarder.parser import read_claims_csv

USER = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"


def write(tmp_path, contents: str) -> str:
    path = tmp_path / "claims.csv"
    path.write_text(contents)
    return str(path)


def test_read_claims(tmp_path):
    path = write(
        tmp_path,
        "address,amount,unlocksAt\n"
        f"{USER},356270202994929792513,1643673600\n"
        "\n"
        f" {USER.lower()} , 5 ,1643673601\n",
    )

    claims = read_claims_csv(path)

    assert len(claims) == 2
    assert claims[0].address == USER
    assert claims[0].amount == 356270202994929792513
    assert claims[0].unlocksAt == 1643673600
    assert claims[1].address == USER.lower()
    assert claims[1].amount == 5


def test_columns_may_be_reordered(tmp_path):
    path = write(tmp_path, f"unlocksAt,address,amount\n100,{USER},1\n")

    [claim] = read_claims_csv(path)

    assert (claim.address, claim.amount, claim.unlocksAt) == (USER, 1, 100)


def test_missing_column(tmp_path):
    path = write(tmp_path, f"address,amount\n{USER},1\n")

    with pytest.raises(MalformedClaimsFileError, match="unlocksAt"):
        read_claims_csv(path)


@pytest.mark.parametrize("amount", ["1.5", "ten", ""])
def test_bad_amount(tmp_path, amount):
    path = write(tmp_path, f"address,amount,unlocksAt\n{USER},{amount},100\n")

    with pytest.raises(MalformedClaimsFileError, match="amount must be an integer"):
        read_claims_csv(path)
