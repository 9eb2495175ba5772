"""General (non-regional) trending pipeline."""

import logging
from typing import Dict, Iterable, List, Optional, Sequence

import httpx
import pendulum

from ..cache import TTLCache
from ..classification import IndiaRelevanceFilter
from ..config import Config
from ..filters import URLValidator
from ..ingestion import SourceAdapter, build_general_adapters
from ..models import ContentItem
from ..ranking import select_top
from .fallback import general_fallback
from .models import AggregationResult, SourceReport, StageReport
from .orchestrator import AdapterFactory, BaseAggregator
from .stages import PipelineStage

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = ("all", "tech", "news")
INDIA_REGIONS = {"IN", "INDIA"}


def parse_categories(value: Optional[str]) -> List[str]:
    """Split a comma-separated category list, keeping order and dropping repeats."""
    if not value:
        return list(DEFAULT_CATEGORIES)
    categories: List[str] = []
    for part in value.split(","):
        name = part.strip().lower()
        if name and name not in categories:
            categories.append(name)
    return categories or list(DEFAULT_CATEGORIES)


class AlternativeAggregator(BaseAggregator):
    """National and international content ordered by quality score."""

    cache_prefix = "alternative"

    def __init__(
        self,
        config: Config,
        client: Optional[httpx.AsyncClient] = None,
        cache: Optional[TTLCache] = None,
        url_validator: Optional[URLValidator] = None,
        adapter_factory: Optional[AdapterFactory] = None,
        india_filter: Optional[IndiaRelevanceFilter] = None,
    ) -> None:
        settings = config.config
        if adapter_factory is None and client is not None:

            def adapter_factory(region: str) -> Sequence[SourceAdapter]:
                return build_general_adapters(config, client, region)

        super().__init__(
            config,
            client=client,
            cache=cache,
            url_validator=url_validator,
            adapter_factory=adapter_factory,
            cache_ttl=settings.cache.alternative_ttl_seconds,
        )
        self.india_filter = india_filter or IndiaRelevanceFilter()
        self.max_items = settings.ranking.max_items_per_category
        self.max_per_source = settings.ranking.max_per_source

    @staticmethod
    def in_category(item: ContentItem, category: str) -> bool:
        return category == "all" or (item.category_hint or "").lower() == category

    def bucket(self, items: Iterable[ContentItem], categories: List[str]) -> Dict[str, List[ContentItem]]:
        """Diversity-limited top items per requested category, by quality score."""
        scored = [
            item.model_copy(update={"quality_score": score, "trending_score": score})
            for item, score in ((item, self.quality.score(item)) for item in items)
        ]
        return {
            category: select_top(
                [item for item in scored if self.in_category(item, category)],
                k=self.max_items,
                max_per_source=self.max_per_source,
            )
            for category in categories
        }

    async def aggregate(
        self,
        region: str = "IN",
        categories: Optional[List[str]] = None,
        time_window_days: Optional[int] = None,
    ) -> AggregationResult:
        """Categorized general content. Cache hits skip the pipeline."""
        region = (region or "IN").upper()
        categories = categories or list(DEFAULT_CATEGORIES)
        window = time_window_days or self.temporal.window_days
        key = (self.cache_prefix, region, tuple(categories), window)
        return await self._cached(key, lambda: self._run(region, categories, window))

    async def _run(self, region: str, categories: List[str], window: int) -> AggregationResult:
        stages: List[PipelineStage] = []
        items, results = await self.collect(region, window, stages)

        relevance_stage = PipelineStage("relevance", "Ordering by regional relevance and quality")
        stages.append(relevance_stage)
        relevance_stage.start()
        if region in INDIA_REGIONS:
            items = self.india_filter.filter_indian(items)
        items = self.quality.sort_by_quality(items)
        relevance_stage.complete({"items": len(items)})

        select_stage = PipelineStage("select", "Diversity selection per category")
        stages.append(select_stage)
        select_stage.start()
        buckets = self.bucket(items, categories)
        select_stage.complete({category: len(bucket) for category, bucket in buckets.items()})

        used_fallback = not any(buckets.values())
        if used_fallback:
            logger.warning("No general content survived filtering, serving fallback content")
            buckets = general_fallback(categories)

        logger.info(
            "Alternative aggregation (%s): %s",
            region,
            ", ".join(f"{category}={len(bucket)}" for category, bucket in buckets.items()),
        )

        return AggregationResult(
            timestamp=pendulum.now("UTC"),
            region=region,
            categories=categories,
            buckets=buckets,
            sources=[SourceReport.from_fetch(result) for result in results],
            stages=[StageReport.from_stage(stage) for stage in stages],
            window_days=window,
            used_fallback=used_fallback,
        )
