import csv

from rewarder.errors import MalformedClaimsFileError
from rewarder.models import ClaimInput, ClaimsCSVColumn

REQUIRED_COLUMNS: list[ClaimsCSVColumn] = ["address", "amount", "unlocksAt"]


def parse_int(value: str, column: str, line: int) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise MalformedClaimsFileError(
            f"Line {line}: {column} must be an integer, got {value!r}"
        )


def read_claims_csv(path: str) -> list[ClaimInput]:
    """
    Reads a csv with header `address,amount,unlocksAt` into claims.
    Addresses are left as given, they are validated when the tree is built.
    """
    with open(path, newline="") as f:
        reader = csv.DictReader(f)
        missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
        if missing:
            raise MalformedClaimsFileError(f"Missing required columns {missing}")

        claims = []
        for row in reader:
            # skip blank lines, DictReader yields them as empty strings
            if not any((v or "").strip() for v in row.values()):
                continue
            line = reader.line_num
            claims.append(
                ClaimInput(
                    address=(row["address"] or "").strip(),
                    amount=parse_int(row["amount"] or "", "amount", line),
                    unlocksAt=parse_int(row["unlocksAt"] or "", "unlocksAt", line),
                )
            )
    return claims
