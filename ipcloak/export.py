# ipcloak/export.py

from __future__ import annotations
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from ipcloak.formats import RULES, decorate, render
from ipcloak.models import Address
from ipcloak.resolve import resolve
from ipcloak.utils.logging import get_logger

log = get_logger(__name__)


PathLike = Union[str, Path]

CATALOG_COLUMNS = ["index", "rule", "form", "line", "value"]


def catalog(
    address: Address,
    prefix: Optional[str] = None,
    postfix: Optional[str] = None,
) -> pd.DataFrame:
    """
    Build a table with one row per cloak rule.

    Columns:
        index: 1-based position in the output
        rule: rule name
        form: undecorated cloaked form
        line: form with prefix/postfix applied
        value: 32-bit value the form resolves to
    """
    forms = render(address)
    df = pd.DataFrame(
        {
            "index": range(1, len(forms) + 1),
            "rule": [rule.name for rule in RULES],
            "form": forms,
            "line": decorate(forms, prefix, postfix),
            "value": [resolve(form) for form in forms],
        },
        columns=CATALOG_COLUMNS,
    )
    return df


def save_catalog(df: pd.DataFrame, path: PathLike) -> Path:
    """
    Write the catalog as CSV or JSON, picked by the file suffix.

    Unknown suffixes are replaced with .csv.

    Returns:
        The path actually written
    """
    out_path = Path(path).expanduser().resolve()
    if out_path.suffix.lower() not in (".csv", ".json"):
        out_path = out_path.with_suffix(".csv")
    log.info("Saving %d catalog rows to %s", len(df), out_path)

    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        if out_path.suffix.lower() == ".json":
            df.to_json(out_path, orient="records", indent=2)
        else:
            df.to_csv(out_path, index=False)
    except OSError as e:
        log.error("Failed to write catalog to %s. Error: %s", out_path, e)
        raise
    else:
        log.debug("Catalog written successfully to %s", out_path)

    return out_path
