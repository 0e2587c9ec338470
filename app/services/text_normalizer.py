from __future__ import annotations

# Tokens made only of these open a markdown bullet, heading, quote or rule
# when they come first on a line.
_LINE_MARKER_CHARS = frozenset("-*+#>")

# Emphasis and inline-code marks wrapped around a word.
_EMPHASIS_CHARS = "*_`~"


def _is_line_marker(token: str) -> bool:
    return set(token) <= _LINE_MARKER_CHARS


def _strip_emphasis(token: str) -> str:
    # A bare symbol token (e.g. "*" in "2 * 3") is content, not markup.
    return token.strip(_EMPHASIS_CHARS) or token


def extract_terms(text: str) -> list[str]:
    """Split text into terms with markdown syntax removed.

    Only markup is dropped: a bullet, heading, quote or rule marker at the
    start of a line, and emphasis or code marks wrapped around a word.
    Every other symbol is kept as a term.
    """
    terms: list[str] = []
    for line in text.splitlines():
        tokens = line.split()
        if tokens and _is_line_marker(tokens[0]):
            tokens = tokens[1:]
        terms.extend(_strip_emphasis(token) for token in tokens)
    return terms


def normalize_text(text: str) -> str:
    """Re-tokenize generated text and rejoin its terms with single spaces.

    Falls back to the stripped input when no term survives.
    """
    return " ".join(extract_terms(text)) or text.strip()
