"""Execute the requests for one search and merge their results."""

from __future__ import annotations

import itertools
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, Iterable, List, Optional

from foodie.core.config import Settings, get_settings
from foodie.etl.transform import to_restaurant
from foodie.models import BusinessRecord, Restaurant
from foodie.search.errors import SearchError
from foodie.search.models import RequestSpec, SearchCriteria
from foodie.search.query_builder import build_requests
from foodie.vendors import yelp

logger = logging.getLogger(__name__)

Deliver = Callable[[Optional[List[Restaurant]], Optional[BaseException]], None]


def within_radius(record: BusinessRecord, radius_meters: int) -> bool:
    """Records without a reported distance count as in range."""
    return record.distance is None or record.distance <= radius_meters


def dedupe_by_id(records: Iterable[BusinessRecord]) -> List[BusinessRecord]:
    seen = set()
    unique: List[BusinessRecord] = []
    for record in records:
        if record.id is not None:
            if record.id in seen:
                continue
            seen.add(record.id)
        unique.append(record)
    return unique


class SearchAggregator:
    """Runs searches against Yelp.

    A search that needs a single request runs on the caller's thread and
    raises its failure. A search that fans out runs every request on its own
    pool, waits for all of them, and treats each failed request as having
    returned nothing.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fetch: Optional[Callable[[RequestSpec], List[BusinessRecord]]] = None,
        dedupe: Optional[bool] = None,
        max_workers: int = 4,
    ) -> None:
        self._settings = settings or get_settings()
        self._fetch = fetch or self._fetch_from_yelp
        self._dedupe = self._settings.dedupe_results if dedupe is None else dedupe
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="search")

    def __enter__(self) -> "SearchAggregator":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    def close(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def submit(self, criteria: SearchCriteria) -> "Future[List[Restaurant]]":
        """Start a search in the background and return its future."""
        return self._executor.submit(self.search, criteria)

    def search(self, criteria: SearchCriteria) -> List[Restaurant]:
        specs = build_requests(criteria)
        radius_meters = specs[0].radius_meters
        logger.info(
            "Searching filters=%s mode=%s radius=%sm requests=%d",
            list(criteria.filters),
            criteria.mode.value,
            radius_meters,
            len(specs),
        )

        if len(specs) == 1:
            batches = [self._fetch(specs[0])]
        else:
            batches = self._fan_out(specs)

        records = list(itertools.chain.from_iterable(batches))
        if self._dedupe:
            records = dedupe_by_id(records)

        restaurants = [to_restaurant(record) for record in records if within_radius(record, radius_meters)]
        logger.info("Search returned %d restaurants (%d before radius filter)", len(restaurants), len(records))
        return restaurants

    def _fan_out(self, specs: List[RequestSpec]) -> List[List[BusinessRecord]]:
        with ThreadPoolExecutor(max_workers=len(specs), thread_name_prefix="search-call") as pool:
            futures = [pool.submit(self._fetch, spec) for spec in specs]
            wait(futures)

        batches: List[List[BusinessRecord]] = []
        for spec, future in zip(specs, futures):
            try:
                batches.append(future.result())
            except SearchError as exc:
                logger.warning("Dropping results for term=%s: %s", spec.category_term, exc)
                batches.append([])
        return batches

    def _fetch_from_yelp(self, spec: RequestSpec) -> List[BusinessRecord]:
        return yelp.business_search(
            spec.to_params(),
            api_key=self._settings.yelp_api_key,
            base_url=self._settings.yelp_base_url,
            timeout=self._settings.http_timeout,
        )


class LatestSearch:
    """Delivers only the outcome of the most recently started search.

    Older searches keep running to completion; their outcome is discarded
    once a newer one has been started.
    """

    def __init__(self, aggregator: SearchAggregator) -> None:
        self._aggregator = aggregator
        self._lock = threading.Lock()
        self._generation = 0

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def start(self, criteria: SearchCriteria, deliver: Deliver) -> "Future[List[Restaurant]]":
        with self._lock:
            self._generation += 1
            generation = self._generation

        future = self._aggregator.submit(criteria)

        def _on_done(done: "Future[List[Restaurant]]") -> None:
            if done.cancelled():
                return
            if not self.is_current(generation):
                logger.debug("Discarding outcome of superseded search generation=%d", generation)
                return
            error = done.exception()
            if error is not None:
                deliver(None, error)
            else:
                deliver(done.result(), None)

        future.add_done_callback(_on_done)
        return future
