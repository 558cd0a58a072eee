"""Fuzzy subsequence filter over task names.

A name matches when every character of the query appears in it, in order and
case-insensitively, though not necessarily adjacent. Matches are ranked by a
score that rewards matches at the start of the name, after separators, on
camelCase boundaries and in contiguous runs. Equal scores keep registry order.
"""

from typing import List, Optional, Sequence, Tuple

from .task_record import TaskRecord

FIRST_CHAR_BONUS = 10
SEPARATOR_BONUS = 20
CAMEL_CASE_BONUS = 20
ADJACENT_BONUS = 5
LEADING_CHAR_PENALTY = -5
MAX_LEADING_PENALTY = -15
SEPARATORS = frozenset("-_ .:/\\")


def _position_bonus(candidate: str, index: int) -> int:
    if index == 0:
        return FIRST_CHAR_BONUS
    prev = candidate[index - 1]
    if prev in SEPARATORS:
        return SEPARATOR_BONUS
    if prev.islower() and candidate[index].isupper():
        return CAMEL_CASE_BONUS
    return 0


def fuzzy_score(query: str, candidate: str) -> Optional[int]:
    """Score `candidate` against `query`; None when it is not a subsequence.

    The best alignment is found with a row-by-row dynamic programme:
    row[j] holds the best score of matching query[:i + 1] with query[i]
    placed at candidate[j].
    """
    if not query:
        return 0
    if len(query) > len(candidate):
        return None
    folded = [ch.lower() for ch in candidate]
    prev_row: List[Optional[int]] = []
    for i, qch in enumerate(query.lower()):
        row: List[Optional[int]] = [None] * len(candidate)
        best_gap: Optional[int] = None  # best prev_row[k] for k < j - 1
        for j, cch in enumerate(folded):
            if i > 0 and j >= 2 and prev_row[j - 2] is not None:
                if best_gap is None or prev_row[j - 2] > best_gap:
                    best_gap = prev_row[j - 2]
            if cch != qch:
                continue
            if i == 0:
                row[j] = _position_bonus(candidate, j) + max(LEADING_CHAR_PENALTY * j, MAX_LEADING_PENALTY)
                continue
            options = []
            if j >= 1 and prev_row[j - 1] is not None:
                options.append(prev_row[j - 1] + ADJACENT_BONUS)
            if best_gap is not None:
                options.append(best_gap)
            if options:
                row[j] = _position_bonus(candidate, j) + max(options)
        prev_row = row
    finals = [value for value in prev_row if value is not None]
    if not finals:
        return None
    return max(finals) - (len(candidate) - len(query))


def filter_records(records: Sequence[TaskRecord], query: str) -> Tuple[TaskRecord, ...]:
    """Return records whose name fuzzy-matches `query`, best first.

    An empty query returns every record in original order.
    """
    if not query:
        return tuple(records)
    scored: List[Tuple[int, int, TaskRecord]] = []
    for index, record in enumerate(records):
        score = fuzzy_score(query, record.name)
        if score is None:
            continue
        scored.append((-score, index, record))
    scored.sort(key=lambda item: (item[0], item[1]))
    return tuple(record for _, _, record in scored)


__all__ = ["fuzzy_score", "filter_records"]
