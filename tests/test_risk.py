import json

import pytest

from pw_audit.pw_lang import load_labels, merged_labels
from pw_audit.pw_risk import (
    NOT_APPLICABLE,
    RiskLabels,
    evaluate_risk,
    load_risk_labels,
    percent,
)

LABELS = RiskLabels(low="Low", medium="Medium", high="High", critical="Critical")


def test_percent():
    assert percent(0, 0) == 0
    assert percent(7, 0) == 0
    assert percent(50, 200) == 25.0
    assert percent(1, 3) == 33.3
    assert percent(1, 8) == 12.5
    # half rounds up
    assert percent(1, 16) == 6.3


def test_evaluate_risk_scenarios():
    metrics = [("reuse", 10), ("weak_complexity", 10), ("short_length", 10), ("cracked", 10)]
    assert evaluate_risk(metrics, LABELS) == ("Low", 10.0)
    metrics = [("reuse", 90), ("weak_complexity", 90), ("short_length", 90), ("cracked", 90)]
    assert evaluate_risk(metrics, LABELS) == ("Critical", 90.0)


@pytest.mark.parametrize("score,expected", [
    (0, "Low"), (10, "Low"), (25, "Medium"), (40, "Medium"),
    (50, "High"), (60, "High"), (75, "Critical"), (90, "Critical"), (100, "Critical"),
])
def test_risk_buckets(score, expected):
    assert evaluate_risk([("metric", score)], LABELS)[0] == expected


def test_evaluate_risk_rounds_to_two_decimals():
    label, score = evaluate_risk([("a", 10), ("b", 20), ("c", 20)], LABELS)
    assert score == pytest.approx(16.67)
    assert label == "Low"


def test_evaluate_risk_empty():
    assert evaluate_risk([], LABELS) == (NOT_APPLICABLE, 0)


def test_load_risk_labels():
    assert load_risk_labels("fr") == RiskLabels("Faible", "Moyen", "Élevé", "Critique")
    assert load_risk_labels("en").critical == "Critical"


def test_missing_locale_degrades_to_empty_labels(capsys):
    labels = load_risk_labels("xx")
    assert labels == RiskLabels()
    assert "[WARN]" in capsys.readouterr().out
    assert evaluate_risk([("metric", 80)], labels) == ("", 80.0)


def test_injected_lookup():
    labels = load_risk_labels("any", lookup=lambda lang: {"Risk": {"low": "ok"}})
    assert labels.low == "ok"
    assert labels.high == ""


def test_load_labels_broken_json(tmp_path):
    (tmp_path / "en.json").write_text("{not json", encoding="utf-8")
    assert load_labels("en", lang_dir=str(tmp_path)) == {}


def test_merged_labels_fall_back_to_english(tmp_path):
    (tmp_path / "en.json").write_text(json.dumps({"Risk": {"low": "Low", "high": "High"}}), encoding="utf-8")
    (tmp_path / "de.json").write_text(json.dumps({"Risk": {"low": "Niedrig"}}), encoding="utf-8")
    merged = merged_labels("de", lang_dir=str(tmp_path))
    assert merged["Risk"] == {"low": "Niedrig", "high": "High"}


def test_load_labels_not_utf8(tmp_path, capsys):
    (tmp_path / "xx.json").write_bytes(b'{"Risk": {"low": "\xff"}}')
    assert load_labels("xx", lang_dir=str(tmp_path)) == {}
    assert "[WARN]" in capsys.readouterr().out


def test_load_labels_top_level_not_object(tmp_path):
    (tmp_path / "xx.json").write_text("[1, 2, 3]", encoding="utf-8")
    assert load_labels("xx", lang_dir=str(tmp_path)) == {}


def test_malformed_sections_degrade_to_empty_labels():
    labels = load_risk_labels("any", lookup=lambda lang: {"Risk": ["low", "high"]})
    assert labels == RiskLabels()
    labels = load_risk_labels("any", lookup=lambda lang: {"Risk": {"low": 3, "high": "High"}})
    assert labels == RiskLabels(high="High")


def test_merged_labels_skip_malformed_sections(tmp_path):
    (tmp_path / "en.json").write_text(json.dumps({"Risk": {"low": "Low"}}), encoding="utf-8")
    (tmp_path / "de.json").write_text(json.dumps({"Risk": "oops", "Hash": {"title": "Hashes"}}), encoding="utf-8")
    merged = merged_labels("de", lang_dir=str(tmp_path))
    assert merged == {"Risk": {"low": "Low"}, "Hash": {"title": "Hashes"}}
