from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List
import logging

import pandas as pd

from core.models import WEEKDAYS
from fees.allocator import normalize_selection
from fees.funding import coerce_pattern, coerce_tier

logger = logging.getLogger(__name__)

_DAY_COLS = [d.lower() for d in WEEKDAYS]
_REQ = {"family", "funding_hours", "funding_pattern"}

def _to_str(x) -> str:
    if pd.isna(x):
        return ""
    return str(x).strip()

def _tier_str(x) -> str:
    # spreadsheets hand back 15.0 for a "15" cell
    s = _to_str(x)
    try:
        f = float(s)
    except ValueError:
        return s
    return str(int(f)) if f.is_integer() else s

def _read_frame(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=object, keep_default_na=False, na_values=[""])
    if suffix == ".xls":
        return pd.read_excel(path, dtype=object, engine="xlrd", keep_default_na=False, na_values=[""])
    raise ValueError(f"Unsupported enquiry file type: {path.name}")

def parse_enquiries(path: Path) -> List[Dict[str, Any]]:
    """
    Read a batch of fee enquiries, one child per row.

    Columns (case-insensitive): family, funding_hours, funding_pattern and
    monday..friday holding full/morning/afternoon or blank. Rows without a
    family name are skipped; a repeated family or any other bad value
    raises ValueError.
    """
    df = _read_frame(path)
    df.columns = [str(c).strip().lower() for c in df.columns]

    missing = _REQ - set(df.columns)
    if missing:
        raise ValueError(f"{path.name}: missing column(s) {sorted(missing)}")

    out: List[Dict[str, Any]] = []
    seen: Dict[str, int] = {}
    for i, row in df.iterrows():
        line = int(i) + 2  # header is line 1
        family = _to_str(row["family"])
        if not family:
            logger.warning("%s line %d: no family name, skipping", path.name, line)
            continue

        key = " ".join(family.split()).casefold()
        if key in seen:
            raise ValueError(f"{path.name} line {line}: family {family!r} already listed on line {seen[key]}")
        seen[key] = line

        slots = [_to_str(row[c]).lower() if c in df.columns else "" for c in _DAY_COLS]
        try:
            tier = coerce_tier(_tier_str(row["funding_hours"]))
            pattern = coerce_pattern(_to_str(row["funding_pattern"]))
            selection = normalize_selection(slots)
        except ValueError as e:
            raise ValueError(f"{path.name} line {line} ({family}): {e}") from e

        out.append({
            "family": family,
            "funding_tier": tier,
            "funding_pattern": pattern,
            "selection": selection,
        })
    return out
