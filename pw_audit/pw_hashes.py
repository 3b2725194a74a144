# pw_hashes.py
# pwdump 格式哈希文件分析: username:rid:lmhash:nthash:::

from collections import Counter
from dataclasses import dataclass, field
from typing import List

from Crypto.Hash import MD4

# ========== 常量 ==========
EMPTY_LM = "aad3b435b51404eeaad3b435b51404ee"   # LM 已禁用
EMPTY_NT = "31d6cfe0d16ae931b73c59d7e0c089c0"   # 空密码的 NT 哈希


@dataclass
class HashStatistics:
    total: int = 0
    unique: int = 0
    reused: int = 0
    lm_present: int = 0
    empty_nt: int = 0
    is_hash: bool = False
    user_equal_hash: List[str] = field(default_factory=list)


# ========== 工具函数 ==========
def nt_hash(text):
    """NT hash: MD4 over the UTF-16LE encoding, lowercase hex."""
    return MD4.new(text.encode("utf-16le")).hexdigest().lower()


def iter_hash_records(filename):
    """
    逐行读取, 跳过空行和字段不足 4 个的记录.
    Yields the colon-split fields of each usable record.
    """
    with open(filename, "r", encoding="utf-8", errors="replace", newline="\n") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            parts = line.split(":")
            if len(parts) < 4:
                continue
            yield parts


def bare_account(account):
    """'CORP\\alice' -> 'alice'"""
    return account.rsplit("\\", 1)[-1]


# ========== 统计 ==========
def compute_hash_stats(filename):
    stats = HashStatistics()
    nt_seen = Counter()

    for parts in iter_hash_records(filename):
        lm = parts[2]
        nt = parts[3]

        stats.total += 1
        if nt == "" or nt.lower() == EMPTY_NT:
            stats.empty_nt += 1
        nt_seen[nt] += 1

        if lm != "" and lm.lower() != EMPTY_LM:
            stats.lm_present += 1

    # 只出现一次的 NT 哈希; an empty-password hash seen once counts as unique too
    stats.unique = sum(1 for c in nt_seen.values() if c == 1)
    stats.reused = stats.total - stats.unique
    stats.is_hash = True
    print(f"[INFO] 从 {filename} 读取到 {stats.total} 条哈希记录。")
    return stats


def username_as_password(filename):
    """Return accounts whose NT hash is the hash of their own (bare) username, in file order."""
    matches = []
    for parts in iter_hash_records(filename):
        account = bare_account(parts[0])
        nt = parts[3].lower()
        if not nt:
            continue
        if nt_hash(account) == nt:
            matches.append(account)
    if matches:
        print(f"[WARN] {len(matches)} 个账户的密码与用户名相同。")
    return matches
