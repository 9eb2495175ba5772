"""Aggregation orchestrators."""

import asyncio
import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import httpx
import pendulum

from ..cache import TTLCache
from ..classification import KeywordTaxonomy, TeluguClassifier, load_taxonomy
from ..config import Config
from ..errors import AggregationError, ConfigurationError, SayCheeseError
from ..filters import QualityFilter, TemporalFilter, URLValidator, deduplicate
from ..ingestion import FetchResult, SourceAdapter, build_telugu_adapters
from ..models import Category, ContentItem
from ..ranking import TrendingRanker
from .fallback import telugu_fallback
from .models import AggregationResult, SourceReport, StageReport
from .stages import PipelineStage

logger = logging.getLogger(__name__)

TELUGU_CATEGORIES = (Category.POLITICS, Category.CINEMA, Category.ALL)

AdapterFactory = Callable[[str], Sequence[SourceAdapter]]


class BaseAggregator:
    """Fan-out, merge, de-duplicate and filter steps shared by every pipeline."""

    cache_prefix = "aggregate"

    def __init__(
        self,
        config: Config,
        client: Optional[httpx.AsyncClient] = None,
        cache: Optional[TTLCache] = None,
        url_validator: Optional[URLValidator] = None,
        adapter_factory: Optional[AdapterFactory] = None,
        cache_ttl: Optional[float] = None,
    ) -> None:
        """
        Initialize aggregator.

        Args:
            config: Configuration manager
            client: Shared HTTP client, required unless both the adapter
                factory and URL validator are supplied
            cache: Aggregate-result cache
            url_validator: Link checker; built from the client when omitted
            adapter_factory: Callable returning adapters for a region
            cache_ttl: Aggregate cache TTL in seconds
        """
        self.config = config
        settings = config.config
        self.client = client
        self.cache_ttl = cache_ttl
        self.cache = cache if cache is not None else TTLCache(default_ttl=cache_ttl or 300, name=f"{self.cache_prefix} cache")
        self.adapter_timeout = settings.http.adapter_timeout_seconds
        self.validate_urls = settings.http.validate_urls
        self.url_concurrency = settings.http.url_validation_concurrency

        if url_validator is None and self.validate_urls:
            if client is None:
                raise ConfigurationError("An HTTP client is required for URL validation")
            url_validator = URLValidator(
                client,
                timeout=settings.http.url_timeout_seconds,
                cache=TTLCache(
                    default_ttl=settings.cache.url_ttl_seconds,
                    max_entries=settings.cache.url_cache_max_entries,
                    name="url cache",
                ),
            )
        self.url_validator = url_validator
        self.adapter_factory = adapter_factory

        filters = settings.filters
        self.temporal = TemporalFilter(
            window_days=filters.recency_days,
            min_year=filters.min_year,
            future_tolerance_days=filters.future_tolerance_days,
        )
        self.quality = QualityFilter(
            min_title_length=filters.min_title_length,
            max_punctuation_ratio=filters.max_punctuation_ratio,
            max_caps_ratio=filters.max_caps_ratio,
        )

    def adapters_for(self, region: str) -> Sequence[SourceAdapter]:
        if self.adapter_factory is None:
            raise ConfigurationError("No adapter factory configured")
        return self.adapter_factory(region)

    async def _run_adapter(self, adapter: SourceAdapter) -> FetchResult:
        """Run one adapter under its timeout. Never raises."""
        name = getattr(adapter, "name", type(adapter).__name__)
        try:
            return await asyncio.wait_for(adapter.fetch(), timeout=self.adapter_timeout)
        except asyncio.TimeoutError:
            error = f"Timed out after {self.adapter_timeout:g}s"
        except Exception as e:
            error = f"Unexpected error: {e!r}"
        logger.warning("%s failed: %s", name, error)
        return FetchResult.failed(name, error)

    async def fetch_all(self, adapters: Sequence[SourceAdapter]) -> List[FetchResult]:
        """Fetch every adapter concurrently."""
        if not adapters:
            return []
        return list(await asyncio.gather(*(self._run_adapter(adapter) for adapter in adapters)))

    async def _valid_links(self, items: List[ContentItem]) -> Optional[Dict[str, bool]]:
        """Validation outcome per link, or None when link checks are disabled."""
        if not self.validate_urls or self.url_validator is None:
            return None
        links = sorted({item.link for item in items if item.has_link})
        results = await self.url_validator.validate_batch(links, concurrency=self.url_concurrency)
        return {r["url"]: bool(r["is_valid"]) for r in results}

    async def filter_items(
        self, items: List[ContentItem], window_days: int, stage: PipelineStage
    ) -> List[ContentItem]:
        """Recency, then quality and link checks on the same survivors, intersected."""
        recent = self.temporal.filter_recent(items, window_days)
        passed_quality = {id(item) for item in self.quality.filter_high_quality(recent)}
        link_status = await self._valid_links(recent)

        kept = []
        dropped_links = 0
        for item in recent:
            if id(item) not in passed_quality:
                continue
            if item.has_link and link_status is not None:
                if not link_status.get(item.link, False):
                    dropped_links += 1
                    continue
                item = item.model_copy(update={"is_valid_url": True})
            kept.append(item)

        stage.complete({
            "recent": len(recent),
            "quality": len(passed_quality),
            "invalid_links": dropped_links,
            "kept": len(kept),
        })
        return kept

    async def collect(
        self, region: str, window_days: int, stages: List[PipelineStage]
    ) -> Tuple[List[ContentItem], List[FetchResult]]:
        """Fetch, merge, de-duplicate and filter."""
        fetch_stage = PipelineStage("fetch", "Fetching sources")
        stages.append(fetch_stage)
        fetch_stage.start()
        results = await self.fetch_all(self.adapters_for(region))
        merged = [item for result in results if result.success for item in result.items]
        failed = sum(1 for r in results if not r.success)
        fetch_stage.stats.update({"adapters": len(results), "failed": failed, "items": len(merged)})
        if results and failed == len(results):
            fetch_stage.fail(f"All {failed} adapters failed")
        else:
            fetch_stage.complete()

        dedup_stage = PipelineStage("dedup", "Removing duplicates")
        stages.append(dedup_stage)
        dedup_stage.start()
        unique = deduplicate(merged)
        dedup_stage.complete({"unique": len(unique)})

        filter_stage = PipelineStage("filter", "Recency, quality and link checks")
        stages.append(filter_stage)
        filter_stage.start()
        kept = await self.filter_items(unique, window_days, filter_stage)
        return kept, results

    async def _cached(self, key, run):
        try:
            return await self.cache.get_or_fetch(key, run, ttl=self.cache_ttl)
        except SayCheeseError:
            raise
        except Exception as e:
            logger.exception("Aggregation failed")
            raise AggregationError(f"Aggregation failed: {e}") from e


class TeluguAggregator(BaseAggregator):
    """Regional pipeline producing Politics, Cinema and All buckets."""

    cache_prefix = "telugu"

    def __init__(
        self,
        config: Config,
        client: Optional[httpx.AsyncClient] = None,
        cache: Optional[TTLCache] = None,
        url_validator: Optional[URLValidator] = None,
        adapter_factory: Optional[AdapterFactory] = None,
        classifier: Optional[TeluguClassifier] = None,
        ranker: Optional[TrendingRanker] = None,
    ) -> None:
        settings = config.config
        if adapter_factory is None and client is not None:

            def adapter_factory(region: str) -> Sequence[SourceAdapter]:
                return build_telugu_adapters(config, client)

        super().__init__(
            config,
            client=client,
            cache=cache,
            url_validator=url_validator,
            adapter_factory=adapter_factory,
            cache_ttl=settings.cache.telugu_ttl_seconds,
        )
        self.classifier = classifier or TeluguClassifier(self._load_taxonomy())
        self.ranker = ranker or TrendingRanker(settings.ranking, self.temporal)

    def _load_taxonomy(self) -> KeywordTaxonomy:
        path = self.config.config.taxonomy_path
        if not path:
            return KeywordTaxonomy()
        try:
            return load_taxonomy(Path(path).expanduser())
        except (FileNotFoundError, ValueError) as e:
            raise ConfigurationError(str(e)) from e

    def classify(self, items: List[ContentItem]) -> Dict[Category, List[ContentItem]]:
        """Attach verdicts and bucket the matches. Non-matches are dropped."""
        buckets: Dict[Category, List[ContentItem]] = {category: [] for category in TELUGU_CATEGORIES}
        for item in items:
            verdict = self.classifier.classify(item.title, item.description)
            if not verdict.is_match:
                continue
            buckets[verdict.category].append(
                item.model_copy(update={"telugu_confidence": verdict, "category": verdict.category})
            )
        return buckets

    async def aggregate(self, region: str = "Telugu", time_window_days: Optional[int] = None) -> AggregationResult:
        """Categorized, ranked regional content. Cache hits skip the pipeline."""
        window = time_window_days or self.temporal.window_days
        key = (self.cache_prefix, region.lower(), tuple(c.value for c in TELUGU_CATEGORIES), window)
        return await self._cached(key, lambda: self._run(region, window))

    async def _run(self, region: str, window: int) -> AggregationResult:
        stages: List[PipelineStage] = []
        items, results = await self.collect(region, window, stages)

        classify_stage = PipelineStage("classify", "Classifying Telugu relevance")
        stages.append(classify_stage)
        classify_stage.start()
        buckets = self.classify(items)
        classify_stage.complete({category.value: len(bucket) for category, bucket in buckets.items()})

        rank_stage = PipelineStage("rank", "Scoring and diversity selection")
        stages.append(rank_stage)
        rank_stage.start()
        ranked: Dict[str, List[ContentItem]] = {
            category.value: self.ranker.rank_category(bucket, category, window_days=window)
            for category, bucket in buckets.items()
        }
        rank_stage.complete({category: len(bucket) for category, bucket in ranked.items()})

        used_fallback = not any(ranked.values())
        if used_fallback:
            logger.warning("No Telugu matches across any bucket, serving fallback content")
            ranked = telugu_fallback()

        logger.info(
            "Telugu aggregation: %s",
            ", ".join(f"{category}={len(bucket)}" for category, bucket in ranked.items()),
        )

        return AggregationResult(
            timestamp=pendulum.now("UTC"),
            region=region,
            categories=[category.value for category in TELUGU_CATEGORIES],
            buckets=ranked,
            sources=[SourceReport.from_fetch(result) for result in results],
            stages=[StageReport.from_stage(stage) for stage in stages],
            window_days=window,
            used_fallback=used_fallback,
        )
