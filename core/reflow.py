"""Title reflow: turn a raw poem title into a line-broken display block."""

import re

from core.constants import LINE_BREAK, POEM_MAXLINELENGTH

_LATIN_START = re.compile(r"^[A-Za-z]")
_NOT_CJK = re.compile(r"[^\u4e00-\u9fa5\t\n\r]")
_WHITESPACE = re.compile(r"\s+")


def normalize_cjk_title(title):
    text = _NOT_CJK.sub(" ", title)
    return _WHITESPACE.sub(" ", text).strip()


def pair_title_tokens(tokens):
    """Merge tokens two at a time when the count is even.

    An odd count is returned one token per line, unpaired.
    """
    tokens = list(tokens)
    if len(tokens) % 2 != 0:
        return tokens
    lines = []
    for i, token in enumerate(tokens):
        if i % 2 == 0:
            lines.append(token)
        else:
            lines[-1] = f"{lines[-1]} {token}"
    return lines


def reflow_title(title):
    if _LATIN_START.match(title or ""):
        return title

    text = normalize_cjk_title(title or "")
    if len(text) >= POEM_MAXLINELENGTH:
        text = LINE_BREAK.join(pair_title_tokens(_WHITESPACE.split(text)))
    return text.replace(" ", LINE_BREAK)
