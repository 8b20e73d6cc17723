import os

from fonds_scrape.errors import InputFileEmpty, InputFileNotFound, InputFileUnreadable
from fonds_scrape.log import log

def load_fund_ids(path):
    """Read one fund identifier per line, skipping blank lines.

    Order and duplicates are kept as they appear in the file.
    """
    abs_path = os.path.abspath(path)
    if not os.path.isfile(abs_path):
        raise InputFileNotFound(abs_path)
    try:
        with open(abs_path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise InputFileUnreadable(abs_path) from e

    fund_ids = [line.strip() for line in lines if line.strip()]
    if not fund_ids:
        raise InputFileEmpty(abs_path)
    log(f"Found {len(fund_ids)} funds in {abs_path}")
    return fund_ids
