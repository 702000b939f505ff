"""
cinex.codec.tokenizer - Value line tokenizer.

Splits a value line on spaces while keeping double-quoted runs intact.
"""

from __future__ import annotations


def tokenize(line: str) -> list[str]:
    """Split one value line into tokens.

    Spaces separate tokens except inside a double-quoted run, where they
    are kept and the quote characters stay part of the token. There is no
    escape for an embedded quote. An unterminated quote runs to the end of
    the line. Empty segments are dropped.

    Args:
        line: A single line of text

    Returns:
        Tokens in order of appearance
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line.strip():
        if char == '"':
            in_quotes = not in_quotes
            current.append(char)
        elif char == " " and not in_quotes:
            token = "".join(current).strip()
            if token:
                tokens.append(token)
            current = []
        else:
            current.append(char)

    token = "".join(current).strip()
    if token:
        tokens.append(token)

    return tokens
