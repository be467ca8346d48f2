"""
Exercise-name resolution against catalog names.

Tries, in order: exact match, case-insensitive match, normalized match
(punctuation, plurals and compound tokens folded), normalized match with
bracketed text removed, and finally fuzzy token overlap.  A fuzzy match must
score at least FUZZY_MIN_SCORE and beat the runner-up by FUZZY_MIN_GAP.

Resolvers are cached per catalog *version* (an opaque string supplied by
the caller), so a changed catalog always gets a fresh resolver.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Literal

ResolveMethod = Literal[
    "exact",
    "case_insensitive",
    "normalized",
    "normalized_no_brackets",
    "fuzzy",
    "none",
]

FUZZY_MIN_SCORE = 0.5
FUZZY_MIN_GAP = 0.05
OVERLAP_BONUS = 1.1

STOP_TOKENS: frozenset[str] = frozenset(
    {"the", "a", "an", "and", "with", "on", "of", "to", "in", "machine", "exercise"}
)

_COMPOUND_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    (r"\btricep\b", "triceps"),
    (r"\bbicep\b", "biceps"),
    (r"\bdumbbells\b", "dumbbell"),
    (r"\bbarbells\b", "barbell"),
    (r"\bkettlebells\b", "kettlebell"),
    (r"\bplates\b", "plate"),
    (r"pull\s*down", "pulldown"),
    (r"push\s*down", "pushdown"),
    (r"chin\s*up", "chinup"),
    (r"pull\s*up", "pullup"),
    (r"push\s*up", "pushup"),
    (r"\b(pullup|pushup|chinup|pulldown|pushdown)s\b", r"\1"),
)


def _collapse_spaces(s: str) -> str:
    return re.sub(r"\s+", " ", s).strip()


def basic_name(name: str) -> str:
    """Trim, unify unicode dashes and collapse whitespace."""
    return _collapse_spaces(re.sub("[\u2010-\u2015]", "-", name or ""))


def strip_brackets(name: str) -> str:
    """Drop (..), [..] and {..} groups with their content."""
    return _collapse_spaces(re.sub(r"\([^)]*\)|\[[^\]]*\]|\{[^}]*\}", " ", name))


def normalized_key(name: str) -> str:
    """Lower-case, punctuation-free key with compound tokens folded."""
    s = basic_name(name).replace("&", " and ")
    s = re.sub(r"[^a-zA-Z0-9]+", " ", s).lower()
    for pattern, repl in _COMPOUND_REPLACEMENTS:
        s = re.sub(pattern, repl, s)
    return _collapse_spaces(s)


def tokenize(name: str) -> frozenset[str]:
    """Content tokens of a name (numbers and stop words dropped)."""
    return frozenset(
        t for t in normalized_key(name).split(" ")
        if t and not t.isdigit() and t not in STOP_TOKENS
    )


def jaccard(a: frozenset[str], b: frozenset[str]) -> float:
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    inter = len(a & b)
    return inter / (len(a) + len(b) - inter)


def overlap_coefficient(a: frozenset[str], b: frozenset[str]) -> float:
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return len(a & b) / min(len(a), len(b))


@dataclass(frozen=True)
class NameResolution:
    """Outcome of one resolve() call; ``name`` is the catalog name when matched."""

    name: str
    method: ResolveMethod

    @property
    def matched(self) -> bool:
        return self.method != "none"


class ExerciseNameResolver:
    """
    Resolves raw exercise names to catalog names.

    Deterministic for a fixed candidate list; results are memoized per raw
    name for the lifetime of the resolver.
    """

    def __init__(self, candidate_names: Iterable[str]):
        self._candidates: list[str] = list(candidate_names)
        self._exact: set[str] = set(self._candidates)
        self._lower: dict[str, str] = {}
        self._normalized: dict[str, str] = {}
        for n in self._candidates:
            self._lower.setdefault(n.lower(), n)
            self._normalized.setdefault(normalized_key(n), n)
        self._tokens: list[tuple[str, frozenset[str]]] = [
            (n, tokenize(n)) for n in self._candidates
        ]
        self._cache: dict[str, NameResolution] = {}

    def resolve(self, raw_name: str) -> NameResolution:
        raw = basic_name(raw_name)
        if not raw:
            return NameResolution(name=raw_name, method="none")

        cached = self._cache.get(raw)
        if cached is None:
            cached = self._cache[raw] = self._resolve_uncached(raw)
        return cached

    def _resolve_uncached(self, raw: str) -> NameResolution:
        if raw in self._exact:
            return NameResolution(name=raw, method="exact")

        lower = self._lower.get(raw.lower())
        if lower is not None:
            return NameResolution(name=lower, method="case_insensitive")

        normalized = self._normalized.get(normalized_key(raw))
        if normalized is not None:
            return NameResolution(name=normalized, method="normalized")

        no_brackets = self._normalized.get(normalized_key(strip_brackets(raw)))
        if no_brackets is not None:
            return NameResolution(name=no_brackets, method="normalized_no_brackets")

        fuzzy = self._fuzzy(tokenize(raw))
        if fuzzy is not None:
            return NameResolution(name=fuzzy, method="fuzzy")

        return NameResolution(name=raw, method="none")

    def _fuzzy(self, tokens: frozenset[str]) -> str | None:
        if not tokens:
            return None

        best_name: str | None = None
        best_score = 0.0
        best_token_count = 0
        second_score = 0.0

        for name, cand_tokens in self._tokens:
            score = max(
                jaccard(tokens, cand_tokens),
                overlap_coefficient(tokens, cand_tokens) * OVERLAP_BONUS,
            )
            if best_name is None or score > best_score:
                if best_name is not None:
                    second_score = best_score
                best_name, best_score, best_token_count = name, score, len(cand_tokens)
            elif score == best_score:
                # Tie: prefer the more general candidate, then alphabetical
                if (len(cand_tokens), name) < (best_token_count, best_name):
                    best_name, best_token_count = name, len(cand_tokens)
            elif score > second_score:
                second_score = score

        if best_name is None:
            return None
        if best_score >= FUZZY_MIN_SCORE and best_score - second_score >= FUZZY_MIN_GAP:
            return best_name
        return None


_RESOLVER_CACHE: dict[str, ExerciseNameResolver] = {}


def get_name_resolver(version: str, candidate_names: Iterable[str]) -> ExerciseNameResolver:
    """
    Resolver for the catalog identified by *version*.

    Only the most recent version is kept; a different version rebuilds
    from *candidate_names*.
    """
    resolver = _RESOLVER_CACHE.get(version)
    if resolver is None:
        _RESOLVER_CACHE.clear()
        resolver = _RESOLVER_CACHE[version] = ExerciseNameResolver(candidate_names)
    return resolver
