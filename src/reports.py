from __future__ import annotations
import csv
from pathlib import Path
from typing import List, Optional

from config.loader import NurseryCfg
from core.models import FeeResult, FeeScheduleCfg
from core.money import format_gbp
from fees.funding import describe_funding_option

EMPTY_STATE = (
  "Select Your Attendance Days\n\n"
  "Choose which days your child will attend to see your personalized fee calculation."
)

def ensure_dir(p: Path):
  p.mkdir(parents=True, exist_ok=True)

def _slug(name: str) -> str:
  s = "".join(ch.lower() if ch.isalnum() else "-" for ch in name.strip())
  return "-".join(part for part in s.split("-") if part) or "quote"

def _ordinal(n: int) -> str:
  if 10 <= n % 100 <= 20:
    return f"{n}th"
  return f"{n}" + {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")

def disclaimer(fees: FeeScheduleCfg) -> str:
  eff = fees.effective_from
  return (
    "**Please note:** This calculator provides an estimate based on the fee structure effective from "
    f"{_ordinal(eff.day)} {eff.strftime('%B %Y')}. "
    "For specific queries about your invoice, please contact our management team."
  )

def render_quote_text(result: Optional[FeeResult]) -> str:
  """Plain-text breakdown for terminals."""
  if result is None:
    return EMPTY_STATE

  lines = []
  for d in result.daily_breakdown:
    lines.append(f"{d.day:<10} {d.session_label}")
    lines.append(f"  session {d.session_hours:g}h | funded {d.funded_hours:g}h | unfunded {d.unfunded_hours:g}h")
    lines.append(
      f"  unfunded cost {format_gbp(d.unfunded_cost)} + resource fee {format_gbp(d.enrichment_fee)}"
      f" = {format_gbp(d.total_daily_cost)}"
    )
  s = result.summary
  lines.append("")
  lines.append(f"Weekly funding hours:      {s.weekly_funding_hours:g}")
  lines.append(f"Total unfunded hours cost: {format_gbp(s.total_unfunded_cost)}")
  lines.append(f"Total resource fees:       {format_gbp(s.total_enrichment_fees)}")
  lines.append(f"Total weekly cost:         {format_gbp(s.total_weekly_cost)}")
  return "\n".join(lines)

def write_quote_md(
  reports_dir: Path,
  family: str,
  result: Optional[FeeResult],
  nursery: NurseryCfg,
  fees: FeeScheduleCfg,
) -> Path:
  ensure_dir(reports_dir)
  path = reports_dir / f"{_slug(family)}.md"

  lines = []
  lines.append(f"# {nursery.name}: Fee Breakdown for {family}\n")

  if result is None:
    lines.append(EMPTY_STATE + "\n")
  else:
    opt = describe_funding_option(result.funding_tier, result.funding_pattern, fees)
    s = result.summary
    lines.append(f"- **Government funding:** {opt.funding_tier.value} hours ({opt.annual_hours} hours per year)")
    lines.append(f"- **Funding pattern:** {opt.title} ({opt.description})")
    lines.append(f"- **Weekly funding hours:** {s.weekly_funding_hours:g}")
    lines.append(f"- **Total weekly cost:** {format_gbp(s.total_weekly_cost)}")
    lines.append("")

    lines.append("## Daily breakdown\n")
    lines.append("| Day | Session | Hours | Funded | Unfunded | Unfunded cost | Resource fee | Daily total |")
    lines.append("|---|---|---:|---:|---:|---:|---:|---:|")
    for d in result.daily_breakdown:
      lines.append(
        f"| {d.day} | {d.session_label} | {d.session_hours:g} | {d.funded_hours:g} | {d.unfunded_hours:g} "
        f"| {format_gbp(d.unfunded_cost)} | {format_gbp(d.enrichment_fee)} | {format_gbp(d.total_daily_cost)} |"
      )
    lines.append("")

    lines.append("## Weekly cost breakdown\n")
    lines.append(f"- Total unfunded hours cost: {format_gbp(s.total_unfunded_cost)}")
    lines.append(f"- Total resource fees: {format_gbp(s.total_enrichment_fees)}")
    lines.append(f"- **Total weekly cost:** {format_gbp(s.total_weekly_cost)}")
    lines.append("")

  lines.append("> " + disclaimer(fees))
  if nursery.contact_email:
    lines.append(f">\n> Contact: {nursery.contact_email}")
  lines.append("")

  path.write_text("\n".join(lines), encoding="utf-8")
  return path

def upsert_quotes_summary(data_dir: Path, family: str, result: Optional[FeeResult]) -> Path:
  ensure_dir(data_dir)
  path = data_dir / "quotes_summary.csv"
  fieldnames = [
    "family", "funding_hours", "funding_pattern", "days_attended",
    "weekly_funding_hours", "total_unfunded_cost", "total_enrichment_fees", "total_weekly_cost",
  ]

  rows: List[dict] = []
  if path.exists():
    with path.open("r", newline="", encoding="utf-8") as f:
      rows = list(csv.DictReader(f))

  rows = [r for r in rows if r.get("family") != family]
  if result is not None:
    s = result.summary
    rows.append({
      "family": family,
      "funding_hours": result.funding_tier.value,
      "funding_pattern": result.funding_pattern.value,
      "days_attended": str(len(result.daily_breakdown)),
      "weekly_funding_hours": f"{s.weekly_funding_hours:.2f}",
      "total_unfunded_cost": f"{s.total_unfunded_cost:.2f}",
      "total_enrichment_fees": f"{s.total_enrichment_fees:.2f}",
      "total_weekly_cost": f"{s.total_weekly_cost:.2f}",
    })
  rows.sort(key=lambda r: r["family"])

  with path.open("w", newline="", encoding="utf-8") as f:
    w = csv.DictWriter(f, fieldnames=fieldnames)
    w.writeheader()
    for r in rows:
      w.writerow({k: r.get(k, "") for k in fieldnames})
  return path
