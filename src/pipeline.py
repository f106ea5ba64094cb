from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, List, Optional

from config.loader import UnifiedConfig
from core.models import FeeResult
from fees.allocator import compute_fees
from ingest.enquiries import parse_enquiries
from reports import upsert_quotes_summary, write_quote_md

logger = logging.getLogger(__name__)

_ENQUIRY_SUFFIXES = {".csv", ".xls"}

def _find_latest_enquiries(enquiries_dir: Path) -> Path:
  candidates = sorted([p for p in enquiries_dir.glob("*")
                       if p.is_file() and p.suffix.lower() in _ENQUIRY_SUFFIXES],
                      key=lambda p: p.stat().st_mtime, reverse=True)
  if not candidates:
    raise FileNotFoundError(f"No enquiry .csv/.xls files found in {enquiries_dir}")
  return candidates[0]

def run_pipeline(cfg: UnifiedConfig, enquiries_path: Optional[Path] = None) -> Dict[str, Optional[FeeResult]]:
  data_dir    = cfg.paths.data_dir
  reports_dir = cfg.paths.reports_dir

  # 1) Read the newest enquiry batch unless one was given
  path = enquiries_path or _find_latest_enquiries(cfg.paths.inputs_dir / "enquiries")
  logger.info("Reading enquiries from %s", path)
  enquiries = parse_enquiries(path)

  if not enquiries:
    logger.warning("No enquiries found in %s", path.name)
    return {}

  # 2) Quote each child independently
  quotes: Dict[str, Optional[FeeResult]] = {}
  written: List[Path] = []
  for e in enquiries:
    family = e["family"]
    result = compute_fees(e["funding_tier"], e["funding_pattern"], e["selection"], cfg.fees)
    if result is None:
      logger.warning("%s: no attendance days selected", family)
    else:
      logger.info("%s: %d day(s), weekly cost %.2f",
                  family, len(result.daily_breakdown), result.total_weekly_cost)

    written.append(write_quote_md(reports_dir, family, result, cfg.nursery, cfg.fees))
    upsert_quotes_summary(data_dir, family, result)
    quotes[family] = result

  logger.info("Wrote %d quote(s) to %s", len(written), reports_dir)
  return quotes
