# pw_report.py
# 报告输出: report.txt + charts/*.png
# 只读取 PasswordStatistics, 不修改统计结果 (mask_stats 除外)

import os

import matplotlib.pyplot as plt

from .pw_analy import sum_length_range
from .pw_lang import label
from .pw_tokens import is_common_english_word, rank_entries

REPORT_NAME = "report.txt"
CHART_DIR = "charts"


# ========== 匿名化 ==========
def mask_password(pwd):
    """保留前 2 位和后 2 位, 中间用 * 替换"""
    if len(pwd) <= 4:
        return pwd
    return pwd[:2] + "*" * (len(pwd) - 4) + pwd[-2:]


def mask_stats(stats):
    """Mask the plaintext passwords in most_reuse. Keywords stay readable."""
    masked = type(stats.most_reuse)()
    for pwd, count in stats.most_reuse.items():
        masked[mask_password(pwd)] += count
    stats.most_reuse = masked
    return stats


# ========== 文本报告 ==========
def _write_rows(f, rows):
    width = max((len(name) for name, _ in rows), default=0)
    for name, value in rows:
        f.write(f"{name:<{width}} : {value}\n")


def _write_top(f, histogram, top, marker=None):
    ranked = rank_entries(histogram)[:top]
    width = max((len(e.key) for e in ranked), default=0)
    for e in ranked:
        suffix = ""
        if marker and marker(e.key):
            suffix = " *"
        f.write(f"{e.key:<{width}} : {e.count}{suffix}\n")


def write_text_report(stats, output_dir, top, labels):
    path = os.path.join(output_dir, REPORT_NAME)
    hashes = stats.hashes

    with open(path, "w", encoding="utf-8") as f:
        if hashes.is_hash:
            f.write(f"\n=== {label(labels, 'Hash', 'title')} ===\n")
            rows = [
                (label(labels, "Hash", "totalNTLM"), hashes.total),
                (label(labels, "Hash", "cracked"), stats.cracked_count),
                (label(labels, "Hash", "uniqueNTLM"), hashes.unique),
                (label(labels, "Hash", "reused"), hashes.reused),
                (label(labels, "Hash", "lm"), hashes.lm_present),
                (label(labels, "Hash", "emptyNTLM"), hashes.empty_nt),
            ]
            if hashes.user_equal_hash:
                rows.append((label(labels, "Hash", "userEqualHash"), len(hashes.user_equal_hash)))
            _write_rows(f, rows)
        else:
            f.write(f"\n=== {label(labels, 'Reuse', 'title')} ===\n")
            _write_rows(f, [
                (label(labels, "Reuse", "total"), stats.cracked_count),
                (label(labels, "Reuse", "unique"), stats.cracked_count - hashes.reused),
                (label(labels, "Reuse", "short"), hashes.reused),
            ])

        f.write(f"\n=== {label(labels, 'Length', 'title')} ===\n")
        _write_rows(f, [
            (label(labels, "Length", "short"), sum_length_range(stats.lengths, 0, 7)),
            (label(labels, "Length", "exact8"), stats.lengths[8]),
            (label(labels, "Length", "exact9"), stats.lengths[9]),
            (label(labels, "Length", "exact10"), stats.lengths[10]),
            (label(labels, "Length", "long"), sum_length_range(stats.lengths, 11, max(stats.lengths, default=0))),
        ])

        f.write(f"\n=== {label(labels, 'Complexity', 'title')} ===\n")
        _write_rows(f, [
            (label(labels, "Complexity", "one"), stats.complexity[1]),
            (label(labels, "Complexity", "two"), stats.complexity[2]),
            (label(labels, "Complexity", "three"), stats.complexity[3]),
            (label(labels, "Complexity", "four"), stats.complexity[4]),
        ])

        f.write(f"\n=== {label(labels, 'Occurrences', 'title')} === ({label(labels, 'Occurrences', 'dictionary')})\n")
        _write_top(f, stats.token_count, top, marker=is_common_english_word)

        legend = ", ".join(f"{c} = {label(labels, 'Pattern', c)}" for c in "luds")
        f.write(f"\n=== {label(labels, 'Pattern', 'title')} === ({legend})\n")
        _write_top(f, stats.patterns, top)

        f.write(f"\n=== {label(labels, 'Mostreuse', 'title')} ===\n")
        _write_top(f, stats.most_reuse, top)

        f.write(f"\n=== {label(labels, 'Risk', 'title')} ===\n")
        f.write(f"{stats.risk} ({stats.global_percent}%)\n")

    print(f"[INFO] 文本报告已保存到 {path}")
    return path


# ========== 图表 ==========
def _bar_chart(path, keys, values, title, xlabel, ylabel, color, rotate=False):
    plt.figure(figsize=(8, 4))
    plt.bar([str(k) for k in keys], values, color=color)
    plt.title(title, fontsize=12)
    plt.xlabel(xlabel)
    plt.ylabel(ylabel)
    if rotate:
        plt.xticks(rotation=45)
    plt.tight_layout()
    plt.savefig(path)
    plt.close()


def write_charts(stats, output_dir, top, labels):
    """Save the PNG charts under <output_dir>/charts and return their paths."""
    chart_dir = os.path.join(output_dir, CHART_DIR)
    os.makedirs(chart_dir, exist_ok=True)
    saved = []

    lengths = sorted(stats.lengths.items())
    path = os.path.join(chart_dir, "chart-length.png")
    _bar_chart(path, [k for k, _ in lengths], [v for _, v in lengths],
               label(labels, "Length", "title"), "Length", "Count", "steelblue")
    saved.append(path)

    path = os.path.join(chart_dir, "chart-complexity.png")
    _bar_chart(path, [1, 2, 3, 4], [stats.complexity[c] for c in (1, 2, 3, 4)],
               label(labels, "Complexity", "title"), "Character classes", "Count", "orange")
    saved.append(path)

    # 关键词只有一个时不画
    if len(stats.token_count) > 1:
        ranked = rank_entries(stats.token_count)[:top]
        path = os.path.join(chart_dir, "chart-keywords.png")
        _bar_chart(path, [e.key for e in ranked], [e.count for e in ranked],
                   label(labels, "Occurrences", "title"), "Keyword", "Count", "lightgreen", rotate=True)
        saved.append(path)

    ranked = rank_entries(stats.patterns)[:top]
    path = os.path.join(chart_dir, "chart-patterns.png")
    _bar_chart(path, [e.key for e in ranked], [e.count for e in ranked],
               label(labels, "Pattern", "title"), "Pattern", "Count", "darkcyan", rotate=True)
    saved.append(path)

    hashes = stats.hashes
    if hashes.total:
        path = os.path.join(chart_dir, "chart-reused.png")
        plt.figure(figsize=(5, 5))
        plt.pie(
            [hashes.unique, hashes.reused],
            labels=[f"{label(labels, 'Reuse', 'unique')} ({hashes.unique})",
                    f"{label(labels, 'Reuse', 'short')} ({hashes.reused})"],
            colors=["#66c2a5", "#fc8d62"],
            autopct="%1.1f%%",
            startangle=90,
        )
        plt.title(label(labels, "Reuse", "title"))
        plt.tight_layout()
        plt.savefig(path)
        plt.close()
        saved.append(path)

    ranked = rank_entries(stats.most_reuse)[:top]
    path = os.path.join(chart_dir, "chart-mostreused.png")
    _bar_chart(path, [e.key for e in ranked], [e.count for e in ranked],
               label(labels, "Mostreuse", "title"), "Password", "Count", "#69b3a2", rotate=True)
    saved.append(path)

    print(f"[INFO] 已保存 {len(saved)} 张图表到 {chart_dir}/")
    return saved
