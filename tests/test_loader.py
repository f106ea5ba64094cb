from datetime import date
from pathlib import Path

import pytest

from config.loader import load_unified_config

BASE = """
nursery:
  name: Little Lodge Nursery
  contact_email: info@littlelodgenursery.com
paths:
  inputs_dir: inputs
  data_dir: data
  reports_dir: reports
"""


def _write(root: Path, text: str) -> Path:
    (root / "config").mkdir(parents=True, exist_ok=True)
    (root / "config" / "settings.yaml").write_text(text, encoding="utf-8")
    return root


def test_defaults_when_fees_and_logging_missing(tmp_path):
    cfg = load_unified_config(_write(tmp_path, BASE))

    assert cfg.nursery.name == "Little Lodge Nursery"
    assert cfg.fees.hourly_rate == 9.10
    assert cfg.fees.funding_hours["30"]["stretched"] == 22.35
    assert cfg.fees.effective_from == date(2025, 9, 1)
    assert cfg.logging.level == "INFO"
    assert cfg.paths.reports_dir == (tmp_path / "reports").resolve()


def test_fee_overrides(tmp_path):
    text = BASE + """
fees:
  hourly_rate: 9.50
  effective_from: "1 April 2026"
  funding_hours:
    15: {stretched: 11.2}
  session_hours: {morning: 4.5}
logging:
  level: DEBUG
"""
    cfg = load_unified_config(_write(tmp_path, text))

    assert cfg.fees.hourly_rate == 9.50
    assert cfg.fees.effective_from == date(2026, 4, 1)
    assert cfg.fees.funding_hours["15"] == {"stretched": 11.2, "termTime": 15.0}
    assert cfg.fees.session_hours["morning"] == 4.5
    assert cfg.fees.session_hours["full"] == 10.0
    assert cfg.logging.level == "DEBUG"


def test_yaml_date_is_accepted(tmp_path):
    cfg = load_unified_config(_write(tmp_path, BASE + "fees:\n  effective_from: 2026-09-01\n"))
    assert cfg.fees.effective_from == date(2026, 9, 1)


def test_unknown_funding_key_rejected(tmp_path):
    text = BASE + "fees:\n  funding_hours:\n    20: {stretched: 14}\n"
    with pytest.raises(ValueError, match="funding_hours"):
        load_unified_config(_write(tmp_path, text))


def test_unknown_session_key_rejected(tmp_path):
    text = BASE + "fees:\n  session_hours: {evening: 3}\n"
    with pytest.raises(ValueError, match="evening"):
        load_unified_config(_write(tmp_path, text))


def test_missing_section(tmp_path):
    text = "nursery:\n  name: X\n"
    with pytest.raises(KeyError, match="paths"):
        load_unified_config(_write(tmp_path, text))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_unified_config(tmp_path)


def test_shipped_settings_load():
    repo = Path(__file__).resolve().parents[1]
    cfg = load_unified_config(repo)
    assert cfg.fees.funding_hours["15"]["stretched"] == 11.18
    assert cfg.fees.enrichment_part_funded == 10.00


@pytest.mark.parametrize("section", ["funding_hours", "session_hours", "annual_hours", "weeks_per_year"])
def test_empty_fee_mapping_keeps_defaults(tmp_path, section):
    cfg = load_unified_config(_write(tmp_path, BASE + f"fees:\n  {section}:\n"))
    assert cfg.fees.funding_hours["15"]["stretched"] == 11.18
    assert cfg.fees.session_hours["full"] == 10.0
    assert cfg.fees.annual_hours["30"] == 1140
    assert cfg.fees.weeks_per_year["termTime"] == 38


def test_empty_tier_mapping_keeps_defaults(tmp_path):
    cfg = load_unified_config(_write(tmp_path, BASE + "fees:\n  funding_hours:\n    30:\n"))
    assert cfg.fees.funding_hours["30"] == {"stretched": 22.35, "termTime": 30.0}


def test_scalar_fee_section_rejected(tmp_path):
    with pytest.raises(ValueError, match="session_hours: expected a mapping"):
        load_unified_config(_write(tmp_path, BASE + "fees:\n  session_hours: 10\n"))
