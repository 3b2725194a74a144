# pw_main.py
# 密码策略审计 - 主程序
# 使用方式：修改下面的全局参数后运行 python -m pw_audit.pw_main
# 输出：OUTPUT_DIR/report.txt, OUTPUT_DIR/charts/*.png

import os
import sys
from dataclasses import dataclass
from typing import Optional

from .pw_analy import (
    analyze_hashes,
    analyze_passwords,
    evaluate_global_risk,
    fill_hash_fallback,
)
from .pw_errors import PwAuditError
from .pw_lang import merged_labels
from .pw_report import mask_stats, write_charts, write_text_report
from .pw_risk import load_risk_labels

# ========== 全局参数 ==========
PASSWORD_FILE = "passwords.txt"   # 一行一个明文密码
HASH_FILE = ""                    # username:rid:lmhash:nthash:::, 留空则不分析哈希
LANG = "en"                       # en / fr / zh
OUTPUT_DIR = "pw_audit_output"
OUTPUT_TYPES = "all"              # text, charts, all
MIN_TOKEN_LEN = 5                 # 关键词最短长度
TOPK = 5
ANONYMIZE = False                 # 只显示密码前 2 位和后 2 位

KNOWN_OUTPUT_TYPES = ("text", "charts", "all")


@dataclass
class RunConfig:
    password_file: str
    hash_file: Optional[str] = None
    lang: str = "en"
    output_dir: str = "pw_audit_output"
    output_types: str = "all"
    min_token_length: int = 5
    top: int = 5
    anonymize: bool = False


def split_output_types(raw):
    types = [t.strip() for t in raw.split(",") if t.strip()]
    for t in types:
        if t not in KNOWN_OUTPUT_TYPES:
            raise PwAuditError(f"unknown output type: {t}")
    return types


def safe_output_dir(output_dir):
    """输出目录必须位于当前工作目录之内"""
    base = os.getcwd()
    out = os.path.abspath(output_dir)
    rel = os.path.relpath(out, base)
    if rel == os.pardir or rel.startswith(os.pardir + os.sep):
        raise ValueError(f"invalid output directory (outside working directory): {output_dir}")
    return rel


def run(config):
    """Analyze, score and write the requested reports. Returns the statistics."""
    output_types = split_output_types(config.output_types)
    output_dir = safe_output_dir(config.output_dir)
    os.makedirs(output_dir, exist_ok=True)

    stats = analyze_passwords(config.password_file, config.min_token_length)
    stats.top = config.top

    if config.hash_file:
        stats.hashes = analyze_hashes(config.hash_file)
        if stats.hashes.total < stats.cracked_count:
            raise PwAuditError(
                f"hash file contains fewer lines ({stats.hashes.total}) "
                f"than password file ({stats.cracked_count})"
            )
    else:
        fill_hash_fallback(stats)

    evaluate_global_risk(stats, load_risk_labels(config.lang))
    print(f"[INFO] 全局风险: {stats.risk} ({stats.global_percent}%)")

    if config.anonymize:
        mask_stats(stats)

    labels = merged_labels(config.lang)
    if "text" in output_types or "all" in output_types:
        write_text_report(stats, output_dir, config.top, labels)
    if "charts" in output_types or "all" in output_types:
        write_charts(stats, output_dir, config.top, labels)
    return stats


# ========== 主程序 ==========
def main():
    print("=" * 60)
    print("🔐 密码策略审计 (password policy audit)")
    print("=" * 60)
    print(f"密码文件: {PASSWORD_FILE}")
    print(f"哈希文件: {HASH_FILE or '-'}")
    print(f"输出目录: {OUTPUT_DIR}")
    print("=" * 60, "\n")

    config = RunConfig(
        password_file=PASSWORD_FILE,
        hash_file=HASH_FILE or None,
        lang=LANG,
        output_dir=OUTPUT_DIR,
        output_types=OUTPUT_TYPES,
        min_token_length=MIN_TOKEN_LEN,
        top=TOPK,
        anonymize=ANONYMIZE,
    )
    try:
        run(config)
    except (PwAuditError, OSError, ValueError) as e:
        print(f"[ERROR] {e}")
        return 1

    print("\n✅ 分析完成，结果已保存。")
    return 0


if __name__ == "__main__":
    sys.exit(main())
