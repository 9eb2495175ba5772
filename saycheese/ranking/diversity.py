"""Source-diversity-constrained top-K selection."""

import logging
from collections import Counter
from typing import Callable, Iterable, List, Optional

from ..models import ContentItem

logger = logging.getLogger(__name__)


def _trending_score(item: ContentItem) -> float:
    return item.trending_score if item.trending_score is not None else 0.0


def select_top(
    items: Iterable[ContentItem],
    k: int = 10,
    max_per_source: int = 2,
    key: Optional[Callable[[ContentItem], float]] = None,
) -> List[ContentItem]:
    """
    Greedy single pass over items sorted by score.

    An item is admitted only while its source has fewer than ``max_per_source``
    admitted items. Skipped items are never reconsidered. Ties are broken by
    title so the output does not depend on input order.
    """
    key = key or _trending_score
    ordered = sorted(items, key=lambda item: (-key(item), item.title))

    counts: Counter = Counter()
    selected: List[ContentItem] = []
    for item in ordered:
        if len(selected) >= k:
            break
        source = item.source or "Unknown"
        if counts[source] >= max_per_source:
            continue
        counts[source] += 1
        selected.append(item)

    logger.debug("Source diversity applied: %s", dict(counts))
    return selected
