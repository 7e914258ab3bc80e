"""Delimiter scanner for inline math spans.

Recognizes ``$...$`` the way CommonMark recognizes code spans: an opener run
of N dollar signs is closed by the next run of exactly N dollar signs.
Runs of other lengths inside the span are literal content.

Complexity:
    A forward scan that reaches the end of the region without finding a
    closer records the latest position of every run length it passed.
    Later openers consult that record instead of rescanning, so a line of
    alternating uneven runs is O(n) rather than O(n^2).

State:
    The record lives in the host-owned ``state.cache`` mapping, which
    markdown-it allocates fresh for each inline pass. The scanner keeps no
    module-level state and is safe to use from several threads as long as
    each pass has its own state.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from markdown_it.token import Token

MARKER = "$"

TOKEN_TYPE = "mathspan"
TOKEN_TAG = "math"

_CACHE_KEY = "mathspan"


class ScanState(Protocol):
    """The parts of markdown-it's ``StateInline`` the scanner touches."""

    src: str
    pos: int
    posMax: int
    pending: str
    cache: dict[Any, Any]

    def push(self, ttype: str, tag: str, nesting: int) -> Token: ...


class DelimiterCache:
    """Run positions observed by forward scans during one pass.

    Attributes:
        last_seen: run length -> start offset of the latest run of that
            length observed by any forward scan
        scanned_from: smallest opener offset whose forward scan reached the
            end of the region without a closer; every run after it has been
            observed. None until such a scan happened.

    """

    __slots__ = ("last_seen", "scanned_from")

    def __init__(self) -> None:
        self.last_seen: dict[int, int] = {}
        self.scanned_from: int | None = None

    def record(self, length: int, start: int) -> None:
        """Remember a run that did not close the current opener."""
        if self.last_seen.get(length, -1) < start:
            self.last_seen[length] = start

    def mark_exhausted(self, start: int) -> None:
        """Note that a scan from ``start`` saw every run up to the region end."""
        if self.scanned_from is None or start < self.scanned_from:
            self.scanned_from = start

    def has_no_closer(self, length: int, start: int) -> bool:
        """True if an opener of ``length`` at ``start`` provably has no closer."""
        if self.scanned_from is None or start < self.scanned_from:
            return False
        return self.last_seen.get(length, -1) <= start

    def __repr__(self) -> str:
        return f"DelimiterCache(last_seen={self.last_seen!r}, scanned_from={self.scanned_from!r})"


def delimiter_cache(state: ScanState) -> DelimiterCache:
    """Get the cache for this pass and scan region, creating it if needed.

    Keyed by ``posMax``: nested tokenization (link labels) narrows the region,
    and runs measured against one bound are not valid against another.
    """
    key = (_CACHE_KEY, state.posMax)
    cache = state.cache.get(key)
    if cache is None:
        cache = state.cache[key] = DelimiterCache()
    return cache


def fold_content(raw: str) -> str:
    """Fold line endings to spaces, then strip one flanking space pair.

    The pair is only stripped when both ends are plain spaces and something
    other than a space sits between them.

    Examples:
        >>> fold_content(" foo $ bar ")
        'foo $ bar'
        >>> fold_content("\\nfoo \\n")
        'foo '
        >>> fold_content("  ")
        '  '

    """
    content = raw.replace("\n", " ")
    if content[:1] == " " and content[-1:] == " " and content.strip(" "):
        return content[1:-1]
    return content


def _run_end(src: str, pos: int, maximum: int) -> int:
    while pos < maximum and src[pos] == MARKER:
        pos += 1
    return pos


def _as_text(state: ScanState, marker: str, silent: bool) -> bool:
    if not silent:
        state.pending += marker
    state.pos += len(marker)
    return True


def scan_mathspan(state: ScanState, silent: bool, min_delims: int = 1) -> bool:
    """Try to match a math span at ``state.pos``.

    Returns False (touching nothing) when there is no marker run at the
    cursor or the run is shorter than ``min_delims``. Otherwise consumes
    input and returns True: either a ``mathspan`` token was pushed, or the
    opener run was turned into plain text because nothing closes it.

    In silent mode no token is pushed and ``pending`` is left alone, but
    ``pos`` advances exactly as it would otherwise.

    Args:
        state: Inline parser state
        silent: Validation pass of the host, no output allowed
        min_delims: Minimum opener run length

    """
    src = state.src
    start = state.pos
    if start >= state.posMax or src[start] != MARKER:
        return False

    maximum = state.posMax
    pos = _run_end(src, start + 1, maximum)
    marker = src[start:pos]
    opener_length = pos - start

    if opener_length < min_delims:
        return False

    cache = delimiter_cache(state)
    if cache.has_no_closer(opener_length, start):
        return _as_text(state, marker, silent)

    match_end = pos
    match_start = src.find(MARKER, match_end, maximum)
    while match_start != -1:
        match_end = _run_end(src, match_start + 1, maximum)
        closer_length = match_end - match_start

        if closer_length == opener_length:
            if not silent:
                token = state.push(TOKEN_TYPE, TOKEN_TAG, 0)
                token.markup = marker
                token.content = fold_content(src[pos:match_start])
            state.pos = match_end
            return True

        cache.record(closer_length, match_start)
        match_start = src.find(MARKER, match_end, maximum)

    cache.mark_exhausted(start)
    return _as_text(state, marker, silent)


def make_inline_rule(min_delims: int = 1) -> Callable[[Any, bool], bool]:
    """Bind ``min_delims`` into an inline rule for ``md.inline.ruler``."""

    def mathspan(state: Any, silent: bool) -> bool:
        return scan_mathspan(state, silent, min_delims)

    return mathspan


__all__ = [
    "MARKER",
    "TOKEN_TAG",
    "TOKEN_TYPE",
    "DelimiterCache",
    "ScanState",
    "delimiter_cache",
    "fold_content",
    "make_inline_rule",
    "scan_mathspan",
]
