"""Validate, deduplicate, score and order raw KCD rows into search items."""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable

from pyuca import Collator

from kcd_search.schemas.search import DiseaseSearchItem
from kcd_search.services.normalizer import normalize_text

logger = logging.getLogger(__name__)

KCD_CATEGORY = "KCD"
MAX_RESULT_COUNT = 24

# A classification code must contain a letter immediately followed by a digit.
_CODE_SHAPE_RE = re.compile(r"[A-Z][0-9]", re.IGNORECASE | re.ASCII)

# Score tiers are additive; a row may earn several
_EXACT_BONUS = 120
_PREFIX_BONUS = 60
_CONTAINS_BONUS = 35
_ALIAS_BONUS = 20
_ALIAS_MIN_QUERY_LENGTH = 2


@dataclass(frozen=True)
class RawCandidateRow:
    """An upstream row with its text fields trimmed; missing or non-text is ''."""

    code: str = ""
    name: str = ""
    english_name: str = ""

    @classmethod
    def from_payload(cls, row: Any) -> RawCandidateRow:
        if not isinstance(row, dict):
            return cls()
        return cls(
            code=_text(row.get("strCategoryCode")),
            name=_text(row.get("strCategoryCodeName")),
            english_name=_text(row.get("strCategoryCodeEnglishName")),
        )


@dataclass(frozen=True)
class ScoredCandidate:
    code: str
    name: str
    english_alias: str
    score: int
    category: str = KCD_CATEGORY

    def to_item(self) -> DiseaseSearchItem:
        return DiseaseSearchItem(
            name=self.name,
            code=self.code,
            category=self.category,
            aliases=unique_aliases([self.english_alias]),
        )


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def unique_aliases(values: Iterable[str | None]) -> list[str]:
    """Trimmed, non-empty values with duplicates removed, first occurrence wins."""
    aliases: dict[str, None] = {}
    for value in values:
        text = _text(value)
        if text:
            aliases.setdefault(text, None)
    return list(aliases)


def is_valid_code(code: str) -> bool:
    return bool(_CODE_SHAPE_RE.search(code))


def score_candidate(
    normalized_query: str, code: str, name: str, english_name: str
) -> int:
    """Relevance of one row against an already-normalized query."""
    norm_name = normalize_text(name)
    norm_code = normalize_text(code)
    norm_english = normalize_text(english_name)

    score = 0
    if norm_name == normalized_query or norm_code == normalized_query:
        score += _EXACT_BONUS
    if norm_name.startswith(normalized_query) or norm_code.startswith(normalized_query):
        score += _PREFIX_BONUS
    if normalized_query in norm_name or normalized_query in norm_code:
        score += _CONTAINS_BONUS
    if (
        normalized_query in norm_english
        and len(normalized_query) >= _ALIAS_MIN_QUERY_LENGTH
    ):
        score += _ALIAS_BONUS
    return score


def accept_rows(normalized_query: str, rows: Iterable[Any]) -> list[ScoredCandidate]:
    """Score every acceptable row, dropping malformed rows and repeated (code, name) pairs."""
    seen: set[str] = set()
    candidates: list[ScoredCandidate] = []
    for payload in rows:
        row = RawCandidateRow.from_payload(payload)
        if not row.code or not row.name:
            logger.debug("Dropping KCD row without code or name: %r", payload)
            continue
        if not is_valid_code(row.code):
            logger.debug("Dropping KCD row with malformed code %r", row.code)
            continue

        dedupe_key = f"{row.code}::{row.name}"
        if dedupe_key in seen:
            continue
        seen.add(dedupe_key)

        candidates.append(
            ScoredCandidate(
                code=row.code,
                name=row.name,
                english_alias=row.english_name,
                score=score_candidate(
                    normalized_query, row.code, row.name, row.english_name
                ),
            )
        )
    return candidates


@functools.lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def collation_key(text: str) -> tuple[int, ...]:
    """Unicode Collation Algorithm sort key (Hangul by jamo, Latin case-folded)."""
    key: tuple[int, ...] = _collator().sort_key(text)
    return key


def rank_rows(
    query: str, rows: Iterable[Any], limit: int = MAX_RESULT_COUNT
) -> list[DiseaseSearchItem]:
    """Turn raw upstream rows into at most ``limit`` ordered search items.

    Ordering is score descending, then collated name ascending. The sort is
    stable, so rows equal on both keep their upstream order.
    """
    normalized_query = normalize_text(query)
    candidates = accept_rows(normalized_query, rows)
    candidates.sort(key=lambda c: (-c.score, collation_key(c.name)))
    return [candidate.to_item() for candidate in candidates[:limit]]
