# pw_analy.py
# 密码文件统计: 长度 / 复杂度 / 结构模式 / 关键词 / 复用
# 哈希文件统计: 总数 / 唯一 / 复用 / LM / 空 NT / 用户名即密码
# 输出: PasswordStatistics, 交给 pw_report 生成报告

from collections import Counter
from dataclasses import dataclass, field

from .pw_charclass import count_categories, password_pattern
from .pw_errors import InsufficientDataError
from .pw_hashes import HashStatistics, compute_hash_stats, username_as_password
from .pw_risk import evaluate_risk, percent
from .pw_tokens import consolidate_tokens, extract_tokens

SHORT_LENGTH_MAX = 10   # 长度 <= 10 视为偏短


@dataclass
class PasswordStatistics:
    cracked_count: int = 0
    lengths: Counter = field(default_factory=Counter)
    complexity: Counter = field(default_factory=Counter)
    patterns: Counter = field(default_factory=Counter)
    most_reuse: Counter = field(default_factory=Counter)
    token_count: Counter = field(default_factory=Counter)
    cracked_reuse_count: int = 0
    hashes: HashStatistics = field(default_factory=HashStatistics)
    global_percent: float = 0
    risk: str = ""
    top: int = 5


# ========== 工具函数 ==========
def iter_passwords(filename):
    """One password per line, line endings removed, empty lines skipped."""
    with open(filename, "r", encoding="utf-8", errors="replace", newline="\n") as f:
        for line in f:
            # 只按 \n 分行, 去掉一个结尾的 \r
            line = line.rstrip("\n")
            if line.endswith("\r"):
                line = line[:-1]
            if not line:
                continue
            yield line


def sum_length_range(lengths, lo, hi):
    """Number of passwords whose length lies in [lo, hi]."""
    return sum(count for length, count in lengths.items() if lo <= length <= hi)


# ========== 密码分析 ==========
def analyze_passwords(filename, min_token_length):
    """
    Scan the password file once and build the aggregate statistics.

    Raises InsufficientDataError when fewer than 2 passwords were read and
    lets OSError propagate when the file cannot be read.
    """
    stats = PasswordStatistics()

    for pwd in iter_passwords(filename):
        length, category = count_categories(pwd)
        stats.cracked_count += 1
        stats.lengths[length] += 1
        stats.complexity[category] += 1
        stats.most_reuse[pwd] += 1
        stats.patterns[password_pattern(pwd)] += 1
        stats.token_count.update(extract_tokens(pwd, min_token_length))

    if stats.cracked_count < 2:
        raise InsufficientDataError(filename, stats.cracked_count)

    print(f"[INFO] 从 {filename} 读取到 {stats.cracked_count} 条密码。")

    stats.token_count = consolidate_tokens(stats.token_count, min_token_length)
    stats.cracked_reuse_count = sum(n for n in stats.most_reuse.values() if n > 1)
    return stats


# ========== 哈希分析 ==========
def analyze_hashes(filename):
    """Hash statistics plus the username-as-password accounts of a pwdump file."""
    hashes = compute_hash_stats(filename)
    hashes.user_equal_hash = username_as_password(filename)
    return hashes


def fill_hash_fallback(stats):
    """没有哈希文件时, 用已破解的密码近似哈希统计."""
    print("[WARN] 未提供哈希文件: 哈希相关统计基于已破解密码, 代表性可能不足。")
    stats.hashes = HashStatistics(
        total=stats.cracked_count,
        reused=stats.cracked_reuse_count,
        unique=stats.cracked_count - stats.cracked_reuse_count,
        is_hash=False,
    )
    return stats


def risk_metrics(stats):
    """Percentages fed to the risk scorer, in a fixed order."""
    weak = stats.complexity[1] + stats.complexity[2] + stats.complexity[3]
    metrics = [
        ("reuse", percent(stats.hashes.reused, stats.hashes.total)),
        ("weak_complexity", percent(weak, stats.cracked_count)),
        ("short_length", percent(sum_length_range(stats.lengths, 0, SHORT_LENGTH_MAX), stats.cracked_count)),
    ]
    if stats.hashes.is_hash:
        metrics.append(("cracked", percent(stats.cracked_count, stats.hashes.total)))
    return metrics


def evaluate_global_risk(stats, labels):
    stats.risk, stats.global_percent = evaluate_risk(risk_metrics(stats), labels)
    return stats
