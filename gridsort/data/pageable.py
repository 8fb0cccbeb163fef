"""
PageableCollection - Paginated record store.

Three modes:
- client:   the full superset lives in memory (``full_collection``); the
            collection itself only holds the current page, re-derived
            whenever the superset changes.
- server:   only the current page is held; paging and sorting re-fetch.
- infinite: like server, but fetching without reset appends records.

Remote fetches run on the asyncio loop. When requests overlap, the last
request wins: responses of superseded requests are discarded.
"""
import asyncio
import math
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Tuple, Union
from loguru import logger
from pydantic import BaseModel, Field

from gridsort.core.config import PagingSettings, QueryParamSettings
from gridsort.core.events import Events, Subscription
from gridsort.data.collection import (
    Collection,
    CollectionError,
    Comparator,
    RecordLike,
    to_record,
    validate_order,
)
from gridsort.data.record import Record

FetchResult = Union[List[RecordLike], Dict[str, Any]]
Fetcher = Callable[[Dict[str, Any]], Awaitable[FetchResult]]


class PagingMode(str, Enum):
    """Where paging and sorting happen."""
    CLIENT = "client"
    SERVER = "server"
    INFINITE = "infinite"


class PagingState(BaseModel):
    """Current paging and sorting parameters."""
    first_page: int = Field(1, ge=0)
    current_page: int = 1
    page_size: int = Field(25, ge=1)
    total_records: Optional[int] = None
    sort_key: Optional[str] = None
    order: Optional[int] = None

    @property
    def total_pages(self) -> Optional[int]:
        if self.total_records is None:
            return None
        return max(1, math.ceil(self.total_records / self.page_size))

    @property
    def last_page(self) -> Optional[int]:
        total = self.total_pages
        return None if total is None else self.first_page + total - 1


class PageableCollection(Collection):
    """
    Collection that exposes one page of a larger record set.

    Example:
        # Client mode: everything in memory
        pageable = PageableCollection(rows, page_size=10)
        pageable.get_page(2)

        # Server mode: pages come from an async fetcher
        pageable = PageableCollection(mode="server", fetcher=load_rows)
        await pageable.fetch()
    """

    def __init__(
        self,
        records: Optional[Iterable[RecordLike]] = None,
        *,
        mode: Optional[Union[str, PagingMode]] = None,
        page_size: Optional[int] = None,
        first_page: Optional[int] = None,
        fetcher: Optional[Fetcher] = None,
        settings: Optional[PagingSettings] = None,
        query_params: Optional[QueryParamSettings] = None,
        name: str = "PageableCollection",
    ):
        settings = settings or PagingSettings()
        self.mode = PagingMode(mode or settings.mode)
        self.fetcher = fetcher
        self.query_params = query_params or QueryParamSettings()
        first = settings.first_page if first_page is None else first_page
        self.state = PagingState(
            first_page=first,
            current_page=first,
            page_size=page_size or settings.page_size,
        )
        self._fetch_generation = 0
        self.pending_fetch: Optional[asyncio.Task] = None
        self._full_subscriptions: List[Subscription] = []
        self.full_collection: Optional[Collection] = None

        super().__init__(name=name)

        if self.mode is PagingMode.CLIENT:
            self.full_collection = Collection(records, name=f"{name}.full")
            for event in (Events.COLLECTION_SORT, Events.COLLECTION_RESET, Events.COLLECTION_ADD):
                self._full_subscriptions.append(
                    self.full_collection.events.subscribe(event, self._on_full_collection_changed)
                )
            self._derive_page(silent=True)
        else:
            self.records = [to_record(r) for r in records or []]

    @property
    def is_remote(self) -> bool:
        """True when sorting and paging require a re-fetch."""
        return self.mode is not PagingMode.CLIENT

    # --- Client-side paging ---

    def _on_full_collection_changed(self, *args) -> None:
        self._derive_page()

    def _derive_page(self, silent: bool = False) -> None:
        """Slice the current page out of the superset."""
        full = self.full_collection
        self.state.total_records = len(full)
        last = self.state.last_page
        if self.state.current_page > last:
            self.state.current_page = last
        start = (self.state.current_page - self.state.first_page) * self.state.page_size
        self.records = full.records[start:start + self.state.page_size]
        if not silent:
            self.trigger(Events.COLLECTION_RESET, self)

    def add(self, items) -> List[Record]:
        if self.mode is PagingMode.CLIENT:
            return self.full_collection.add(items)
        return super().add(items)

    def reset(self, items: Optional[Iterable[RecordLike]] = None) -> None:
        if self.mode is PagingMode.CLIENT:
            self.full_collection.reset(items)
        else:
            super().reset(items)

    # --- Paging ---

    def get_page(self, page: int) -> Optional[asyncio.Task]:
        """
        Move to a page.

        Args:
            page: Page number (counted from ``state.first_page``)

        Returns:
            The fetch task in remote modes, None in client mode

        Raises:
            ValueError: If the page is outside the known range
        """
        last = self.state.last_page
        if page < self.state.first_page or (last is not None and page > last):
            raise ValueError(f"Page {page} out of range ({self.state.first_page}-{last})")
        if self.is_remote:
            self.ensure_fetchable()
        self.state.current_page = page
        if self.is_remote:
            return self.fetch(reset=self.mode is PagingMode.SERVER)
        self._derive_page()
        return None

    def get_first_page(self) -> Optional[asyncio.Task]:
        return self.get_page(self.state.first_page)

    def get_next_page(self) -> Optional[asyncio.Task]:
        return self.get_page(self.state.current_page + 1)

    def get_previous_page(self) -> Optional[asyncio.Task]:
        return self.get_page(self.state.current_page - 1)

    def has_previous_page(self) -> bool:
        return self.state.current_page > self.state.first_page

    def has_next_page(self) -> bool:
        last = self.state.last_page
        if last is None:
            return self.is_remote
        return self.state.current_page < last

    # --- Sorting ---

    def set_sorting(
        self,
        sort_key: Optional[str],
        order: Optional[int],
        make_comparator: Optional[Callable[[str, int], Optional[Comparator]]] = None,
    ) -> None:
        """
        Record the sort parameters.

        In client mode the superset's comparator is rebuilt from them (or
        cleared when either is missing). Remote modes only remember them
        for the next ``query()``.

        Args:
            sort_key: Attribute to sort by, or None
            order: -1, 1 or None
            make_comparator: Factory used to build the client-side comparator
        """
        order = validate_order(order)
        self.state.sort_key = sort_key
        self.state.order = order
        if self.mode is PagingMode.CLIENT:
            if sort_key and order and make_comparator is not None:
                self.full_collection.comparator = make_comparator(sort_key, order)
            else:
                self.full_collection.comparator = None
        logger.debug(f"{self.name}: sorting set to {sort_key!r} order={order}")

    # --- Remote fetch ---

    def query(self) -> Dict[str, Any]:
        """Query parameters describing the page to fetch."""
        names = self.query_params
        params: Dict[str, Any] = {
            names.current_page: self.state.current_page,
            names.page_size: self.state.page_size,
        }
        if self.state.sort_key and self.state.order:
            params[names.sort_key] = self.state.sort_key
            params[names.order] = names.ascending if self.state.order == -1 else names.descending
        return params

    def ensure_fetchable(self) -> asyncio.AbstractEventLoop:
        """
        Check that a fetch can be scheduled right now.

        Returns:
            The running event loop

        Raises:
            CollectionError: In client mode or when no fetcher is configured
            RuntimeError: If no event loop is running
        """
        if not self.is_remote:
            raise CollectionError(f"{self.name}: client-mode collections have nothing to fetch")
        if self.fetcher is None:
            raise CollectionError(f"{self.name}: no fetcher configured")
        try:
            return asyncio.get_running_loop()
        except RuntimeError as e:
            raise RuntimeError(f"{self.name}: fetch needs a running event loop") from e

    def fetch(self, reset: bool = True) -> asyncio.Task:
        """
        Schedule a fetch of the current page on the running event loop.

        The caller does not wait; await the returned task to observe the
        result. A task whose request was superseded resolves to None.
        Nothing changes when scheduling is impossible.

        Raises:
            CollectionError: In client mode or when no fetcher is configured
            RuntimeError: If no event loop is running
        """
        loop = self.ensure_fetchable()

        self._fetch_generation += 1
        generation = self._fetch_generation
        query = self.query()
        logger.debug(f"{self.name}: fetch #{generation} {query}")
        self.trigger(Events.FETCH_STARTED, query, self)
        # Strong reference: the loop only keeps weak ones
        self.pending_fetch = loop.create_task(self._run_fetch(generation, query, reset))
        return self.pending_fetch

    async def _run_fetch(self, generation: int, query: Dict[str, Any], reset: bool) -> Optional[List[Record]]:
        response = await self.fetcher(query)

        if generation != self._fetch_generation:
            logger.info(
                f"{self.name}: discarding stale response #{generation} "
                f"(current #{self._fetch_generation})"
            )
            self.trigger(Events.FETCH_DISCARDED, query, self)
            return None

        records, total = self._parse_response(response)
        if total is not None:
            self.state.total_records = total

        if reset or self.mode is PagingMode.SERVER:
            self.reset(records)
        else:
            self.add(records)

        self.trigger(Events.FETCH_COMPLETED, query, self)
        return self.records

    def _parse_response(self, response: FetchResult) -> Tuple[List[RecordLike], Optional[int]]:
        if isinstance(response, dict):
            total = response.get(self.query_params.total_records)
            return list(response.get("records", [])), total
        return list(response), None

    def close(self) -> None:
        """Release the subscriptions held on the superset."""
        for subscription in self._full_subscriptions:
            subscription.cancel()
        self._full_subscriptions.clear()
