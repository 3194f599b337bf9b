"""
Bounded fetch scheduler.

Downloads charts through a fixed-size worker pool. Tasks wait in a queue and
are started greedily whenever an in-flight download finishes, so at most
max_concurrent downloads are outstanding at any time. Completion order is
arbitrary; results are handed back in input order.
"""

from collections import deque
from collections.abc import Sequence
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Optional

from ..errors import ConfigurationError, FetchError, SchedulerInvariantError
from ..logging.config import get_fetch_logger
from ..models import ErrorLog, FetchResult, FetchTask
from .retry import RetryingFetcher

logger = get_fetch_logger(__name__)


class BoundedFetchScheduler:
    """Runs one retrying fetch per symbol with a concurrency cap."""

    def __init__(self, fetcher: RetryingFetcher, url_template: str):
        self.fetcher = fetcher
        self.url_template = url_template
        self.logger = logger

    def url_for(self, symbol: str) -> str:
        return self.url_template.replace("{symbol}", symbol)

    def fetch_all(
        self,
        symbols: Sequence[str],
        max_concurrent: int,
        error_log: Optional[ErrorLog] = None
    ) -> list[FetchResult]:
        """
        Fetch every symbol's chart with at most max_concurrent in flight.

        Args:
            symbols: Symbols in display order
            max_concurrent: Cap on simultaneously outstanding downloads
            error_log: Accumulator for failure messages; a fresh one is used if omitted

        Returns:
            One FetchResult per symbol, in the same order as symbols

        Raises:
            ConfigurationError: If max_concurrent is less than 1
            SchedulerInvariantError: If a task finished without a result
        """
        if max_concurrent < 1:
            raise ConfigurationError(
                f"max_concurrent must be at least 1, got {max_concurrent}",
                field="max_concurrent"
            )
        if error_log is None:
            error_log = ErrorLog()

        tasks = [FetchTask(symbol=symbol, position=i) for i, symbol in enumerate(symbols)]
        if not tasks:
            return []

        pending = deque(tasks)
        in_flight: dict[Future, FetchTask] = {}
        completed: dict[int, FetchResult] = {}

        self.logger.info(
            "Starting chart downloads",
            symbols=list(symbols),
            max_concurrent=max_concurrent
        )

        with ThreadPoolExecutor(
            max_workers=min(max_concurrent, len(tasks)),
            thread_name_prefix="chart-fetch"
        ) as pool:
            while pending or in_flight:
                while pending and len(in_flight) < max_concurrent:
                    task = pending.popleft()
                    in_flight[pool.submit(self._fetch_one, task, error_log)] = task

                done, _ = wait(in_flight, return_when=FIRST_COMPLETED)
                for future in done:
                    task = in_flight.pop(future)
                    completed[task.position] = future.result()

        results = self._collect_in_order(tasks, completed)

        self.logger.info(
            "Chart downloads finished",
            total=len(results),
            failed=sum(1 for r in results if not r.success)
        )
        return results

    def _fetch_one(self, task: FetchTask, error_log: ErrorLog) -> FetchResult:
        """Fetch one chart; a failure becomes a failed result and a log entry."""
        url = self.url_for(task.symbol)
        try:
            image = self.fetcher.fetch_with_retry(url, symbol=task.symbol)
        except FetchError as e:
            error_log.append(task.symbol, str(e))
            self.logger.warning(
                "Chart download failed",
                symbol=task.symbol,
                url=url,
                attempts=e.attempts,
                error=str(e),
                last_error=str(e.last_error) if e.last_error else None
            )
            return FetchResult.failed(task.symbol, str(e))

        return FetchResult.ok(task.symbol, image)

    @staticmethod
    def _collect_in_order(
        tasks: Sequence[FetchTask],
        completed: dict[int, FetchResult]
    ) -> list[FetchResult]:
        """Put results back in input order, failing loudly on any gap."""
        missing = [task.symbol for task in tasks if task.position not in completed]
        if missing:
            raise SchedulerInvariantError(
                f"No fetch result for: {', '.join(missing)}",
                missing_symbols=missing
            )
        return [completed[task.position] for task in tasks]
