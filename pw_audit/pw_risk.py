# pw_risk.py
# 全局风险评分: 各项百分比取平均 -> Low / Medium / High / Critical

import math
from dataclasses import dataclass

from .pw_lang import label, load_labels

NOT_APPLICABLE = "N/A"


@dataclass
class RiskLabels:
    low: str = ""
    medium: str = ""
    high: str = ""
    critical: str = ""


def round_half_up(x):
    # .5 rounds away from zero, unlike the built-in round()
    return math.floor(x + 0.5)


def percent(part, total):
    """part / total in percent, one decimal; 0 when total is 0."""
    if total == 0:
        return 0
    return round_half_up(part / total * 1000) / 10


def load_risk_labels(lang, lookup=load_labels):
    """Risk labels for lang. lookup returns {} when the locale is unavailable."""
    labels = lookup(lang)
    return RiskLabels(
        low=label(labels, "Risk", "low"),
        medium=label(labels, "Risk", "medium"),
        high=label(labels, "Risk", "high"),
        critical=label(labels, "Risk", "critical"),
    )


def evaluate_risk(metrics, labels):
    """
    metrics: ordered list of (name, percentage) pairs, each already in [0, 100].
    All metrics weigh the same. Returns (label, score).
    """
    if not metrics:
        return NOT_APPLICABLE, 0

    score = sum(value for _, value in metrics) / len(metrics)
    score = round_half_up(score * 100) / 100

    if score < 25:
        return labels.low, score
    if score < 50:
        return labels.medium, score
    if score < 75:
        return labels.high, score
    return labels.critical, score
