# pw_charclass.py
# 字符分类 + 密码结构模式编码
# l = lowercase, u = uppercase, d = digit, s = special (everything else)

import unicodedata

# 只看 Unicode 通用类别: 'ª' (Lo) 和 'Ⅷ' (Nl) 都算特殊字符
CATEGORY_SYMBOLS = {
    "Lu": "u",
    "Ll": "l",
    "Nd": "d",
}


def classify_char(ch):
    """Return the category symbol of a single character."""
    return CATEGORY_SYMBOLS.get(unicodedata.category(ch), "s")


def count_categories(password):
    """
    返回 (长度, 复杂度)
    complexity is the number of distinct categories (1-4) found in the password.
    """
    found = {classify_char(ch) for ch in password}
    return len(password), len(found)


def password_pattern(password):
    """'Passwo1' -> 'ullllld'"""
    return "".join(classify_char(ch) for ch in password)
