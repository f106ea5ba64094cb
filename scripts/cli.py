from pathlib import Path
import argparse
import sys

REPO = Path(__file__).resolve().parents[1]
SRC = REPO / "src"
if str(SRC) not in sys.path:
  sys.path.insert(0, str(SRC))

from config.loader import load_unified_config
from core.logging_config import setup_logging
from core.models import FeeScheduleCfg, FundingPattern, FundingTier, SessionType, WEEKDAYS
from fees.allocator import compute_fees
from pipeline import run_pipeline
from reports import render_quote_text

_DAY_FLAGS = ["mon", "tue", "wed", "thu", "fri"]

def _parse_args(argv=None) -> argparse.Namespace:
  parser = argparse.ArgumentParser(description="Nursery funded-hours fee calculator")
  parser.add_argument("--repo-root", default=str(REPO), help="Directory holding config/settings.yaml")
  parser.add_argument("--log-level", default=None, help="Override the configured log level")
  sub = parser.add_subparsers(dest="command", required=True)

  q = sub.add_parser("quote", help="Quote one child's week")
  q.add_argument("--hours", choices=[t.value for t in FundingTier], default=FundingTier.FIFTEEN.value)
  q.add_argument("--pattern", choices=[p.value for p in FundingPattern], default=FundingPattern.STRETCHED.value)
  q.add_argument("--defaults", action="store_true", help="Use the built-in fee schedule, skip settings.yaml")
  sessions = [s.value for s in SessionType]
  for flag, day in zip(_DAY_FLAGS, WEEKDAYS):
    q.add_argument(f"--{flag}", choices=sessions, default=None, help=f"{day} session")

  b = sub.add_parser("batch", help="Quote every enquiry in the newest inputs/enquiries file")
  b.add_argument("--file", default=None, help="Enquiry file to use instead of the newest one")
  return parser.parse_args(argv)

def main(argv=None):
  args = _parse_args(argv)
  root = Path(args.repo_root)

  if args.command == "quote" and args.defaults:
    setup_logging(args.log_level or "WARNING")
    fees = FeeScheduleCfg()
  else:
    cfg = load_unified_config(root)
    setup_logging(args.log_level or cfg.logging.level, cfg.logging.log_to_file, cfg.logging.log_filename)
    fees = cfg.fees

  if args.command == "quote":
    selection = [getattr(args, flag) for flag in _DAY_FLAGS]
    result = compute_fees(args.hours, args.pattern, selection, fees)
    print(render_quote_text(result))
    return

  run_pipeline(cfg, Path(args.file) if args.file else None)

if __name__ == "__main__":
  main()
