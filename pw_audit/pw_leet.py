# pw_leet.py
# leet -> letter 反替换

# 常见 leet 替换 + 带重音字母
LEET_MAP = {
    '0': 'o',
    '1': 'i',
    '3': 'e',
    '4': 'a',
    '5': 's',
    '$': 's',
    '!': 'i',
    '|': 'i',
    '@': 'a',
    'é': 'e',
    'è': 'e',
    'à': 'a',
    'ù': 'u',
    'ç': 'c',
    'ï': 'i',
}

LEET_SUFFIXES = ('i', 'e', 'a', 's', 'o')


def unleet(token):
    """
    把常见 leet 字替换成对应字母。
    'p@ssw0rd' and 'p4ssword' both become 'password'.
    """
    return ''.join(LEET_MAP.get(ch, ch) for ch in token)


def truncate_leet_suffix(token):
    """Drop a trailing i/e/a/s/o when at least 4 characters remain."""
    if len(token) < 5:
        return token
    if token[-1] in LEET_SUFFIXES:
        return token[:-1]
    return token
