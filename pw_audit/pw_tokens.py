# pw_tokens.py
# 关键词提取 + 合并 (keyword extraction and consolidation)

import re
from collections import Counter, namedtuple

from wordfreq import zipf_frequency

from .pw_leet import truncate_leet_suffix, unleet

# 4 个以上字母, leet 数字/符号也算进来 so that 'p@ssw0rd' stays one token
TOKEN_RE = re.compile(r"[A-Za-z01345$!|@é]{4,}")

Entry = namedtuple("Entry", ["key", "count"])


def extract_tokens(line, min_token_length):
    """Return the normalized keyword tokens of one password line."""
    tokens = []
    for matched in TOKEN_RE.findall(line):
        token = unleet(matched.lower())
        if len(token) >= min_token_length:
            tokens.append(token)
    return tokens


def rank_entries(histogram):
    """按次数降序排序, 次数相同时按 key 升序."""
    return [Entry(k, v) for k, v in sorted(histogram.items(), key=lambda x: (-x[1], x[0]))]


def merge_into_smaller(entries):
    """
    Absorb every entry whose key contains another surviving key into that
    shorter key ('passwordx' -> 'password').

    entries must be ranked. Absorbed entries are skipped both as sources and
    as targets, so the sum of counts is preserved.
    """
    counts = [e.count for e in entries]
    absorbed = set()
    for i in range(len(entries)):
        if i in absorbed:
            continue
        for j in range(len(entries)):
            if i == j or j in absorbed:
                continue
            if entries[j].key in entries[i].key:
                counts[j] += counts[i]
                absorbed.add(i)
                break
    return [Entry(e.key, counts[i]) for i, e in enumerate(entries) if i not in absorbed]


def truncate_histogram(histogram, min_token_length):
    """Re-key tokens by their leet-suffix-stripped form when it is still long enough."""
    truncated = Counter()
    for token, count in histogram.items():
        base = truncate_leet_suffix(token)
        if len(base) >= min_token_length:
            truncated[base] += count
        else:
            truncated[token] += count
    return truncated


def max_count(entries):
    if not entries:
        return 0
    return max(e.count for e in entries)


def consolidate_tokens(histogram, min_token_length):
    """
    两种合并策略取最强者:
      A. 直接子串合并
      B. 先去掉 leet 后缀再子串合并
    B wins only with a strictly larger top count. Must run on the complete
    histogram; shard histograms are summed before calling this.
    """
    plain = merge_into_smaller(rank_entries(histogram))
    stripped = merge_into_smaller(rank_entries(truncate_histogram(histogram, min_token_length)))

    chosen = plain
    if max_count(stripped) > max_count(plain):
        chosen = stripped
    return Counter({e.key: e.count for e in chosen})


def is_common_english_word(word, min_freq=3.0):
    """用 wordfreq 判断是否为常见英文单词"""
    return zipf_frequency(word, 'en') >= min_freq
