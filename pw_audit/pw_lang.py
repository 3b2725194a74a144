# pw_lang.py
# 语言文件加载 (lang/<lang>.json)

import json
import os

LANG_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "lang")
DEFAULT_LANG = "en"


def load_labels(lang, lang_dir=LANG_DIR):
    """
    读取语言文件, 失败时返回空 dict.
    A missing or broken locale never aborts the run.
    """
    path = os.path.join(lang_dir, f"{lang}.json")
    try:
        with open(path, "r", encoding="utf-8") as f:
            labels = json.load(f)
    except OSError as e:
        print(f"[WARN] 无法打开语言文件 {path}: {e}")
        return {}
    except ValueError as e:
        # JSONDecodeError 和 UnicodeDecodeError 都是 ValueError
        print(f"[WARN] 语言文件解析失败 {path}: {e}")
        return {}
    if not isinstance(labels, dict):
        print(f"[WARN] 语言文件格式错误 {path}: 顶层不是 JSON 对象")
        return {}
    return labels


def label(labels, section, key, default=""):
    values = labels.get(section)
    if not isinstance(values, dict):
        return default
    value = values.get(key, default)
    if not isinstance(value, str):
        return default
    return value


def merged_labels(lang, lang_dir=LANG_DIR):
    """Locale labels layered over the English ones, used by the report writers."""
    base = load_labels(DEFAULT_LANG, lang_dir) if lang != DEFAULT_LANG else {}
    local = load_labels(lang, lang_dir)
    merged = {}
    for labels in (base, local):
        for section, values in labels.items():
            if isinstance(values, dict):
                merged.setdefault(section, {}).update(values)
    return merged
