from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict

from dateutil import parser as dup

from core.models import FeeScheduleCfg, FundingPattern, FundingTier, SessionType

@dataclass
class NurseryCfg:
  name: str
  contact_email: str

@dataclass
class PathsCfg:
  inputs_dir: Path
  data_dir: Path
  reports_dir: Path
  config_dir: Path

@dataclass
class LoggingCfg:
  level: str = "INFO"
  log_to_file: bool = False
  log_filename: str = "nursery_fees.log"

@dataclass
class UnifiedConfig:
  nursery: NurseryCfg
  fees: FeeScheduleCfg
  paths: PathsCfg
  logging: LoggingCfg

def _to_date(raw: Any) -> date:
    if isinstance(raw, date):
        return raw
    return dup.parse(str(raw)).date()

def _check_keys(what: str, keys, allowed) -> None:
    unknown = sorted(str(k) for k in keys if str(k) not in allowed)
    if unknown:
        raise ValueError(f"settings.yaml fees.{what}: unknown key(s) {unknown}; expected {sorted(allowed)}")

def _section(what: str, raw: Any) -> Dict[str, Any]:
    # `key:` with no value loads as None
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"settings.yaml fees.{what}: expected a mapping, got {type(raw).__name__}")
    return raw

def _load_fees(fees: Dict[str, Any]) -> FeeScheduleCfg:
    tiers = {t.value for t in FundingTier}
    patterns = {p.value for p in FundingPattern}
    sessions = {s.value for s in SessionType}
    cfg = FeeScheduleCfg()

    if "hourly_rate" in fees:
        cfg.hourly_rate = float(fees["hourly_rate"])
    if "enrichment_fully_funded" in fees:
        cfg.enrichment_fully_funded = float(fees["enrichment_fully_funded"])
    if "enrichment_part_funded" in fees:
        cfg.enrichment_part_funded = float(fees["enrichment_part_funded"])

    if "funding_hours" in fees:
        table = _section("funding_hours", fees["funding_hours"])
        _check_keys("funding_hours", table.keys(), tiers)
        for tier, raw in table.items():
            by_pattern = _section(f"funding_hours.{tier}", raw)
            _check_keys(f"funding_hours.{tier}", by_pattern.keys(), patterns)
            for pattern, hours in by_pattern.items():
                cfg.funding_hours[str(tier)][str(pattern)] = float(hours)

    if "session_hours" in fees:
        m = _section("session_hours", fees["session_hours"])
        _check_keys("session_hours", m.keys(), sessions)
        cfg.session_hours.update({str(k): float(v) for k, v in m.items()})

    if "annual_hours" in fees:
        m = _section("annual_hours", fees["annual_hours"])
        _check_keys("annual_hours", m.keys(), tiers)
        cfg.annual_hours.update({str(k): int(v) for k, v in m.items()})

    if "weeks_per_year" in fees:
        m = _section("weeks_per_year", fees["weeks_per_year"])
        _check_keys("weeks_per_year", m.keys(), patterns)
        cfg.weeks_per_year.update({str(k): int(v) for k, v in m.items()})

    if "effective_from" in fees:
        cfg.effective_from = _to_date(fees["effective_from"])

    return cfg

def load_unified_config(repo_root: Path) -> UnifiedConfig:
    """Load config/settings.yaml. The fees and logging sections are optional."""
    cfg_dir = repo_root / "config"
    yaml_cfg = cfg_dir / "settings.yaml"

    # Require PyYAML
    try:
        import yaml  # type: ignore
    except ImportError as e:
        raise ImportError(
            "PyYAML is required to read config/settings.yaml. Install with: pip install pyyaml"
        ) from e

    if not yaml_cfg.exists():
        raise FileNotFoundError(
            f"Missing {yaml_cfg}. Create it with 'nursery' and 'paths' sections."
        )

    y: Dict[str, Any] = yaml.safe_load(yaml_cfg.read_text(encoding="utf-8")) or {}

    # minimal structure checks (fail fast with clear messages)
    for section in ["nursery", "paths"]:
        if section not in y:
            raise KeyError(f"settings.yaml is missing the '{section}' section")

    nursery = y["nursery"]
    paths = y["paths"]
    log = y.get("logging") or {}

    return UnifiedConfig(
        nursery=NurseryCfg(
            name=str(nursery["name"]),
            contact_email=str(nursery.get("contact_email", "")),
        ),
        fees=_load_fees(y.get("fees") or {}),
        paths=PathsCfg(
            inputs_dir=(repo_root / paths["inputs_dir"]).resolve(),
            data_dir=(repo_root / paths["data_dir"]).resolve(),
            reports_dir=(repo_root / paths["reports_dir"]).resolve(),
            config_dir=cfg_dir.resolve(),
        ),
        logging=LoggingCfg(
            level=str(log.get("level", "INFO")),
            log_to_file=bool(log.get("log_to_file", False)),
            log_filename=str(log.get("log_filename", "nursery_fees.log")),
        ),
    )
