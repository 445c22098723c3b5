"""Batch orchestrator - coordinates validation, rate limiting, scraping and scoring."""

import asyncio
import time
from collections.abc import Awaitable, Callable
from datetime import datetime

from profilecheck.analysis.analyzer import analyze_profile
from profilecheck.config import VerifierConfig
from profilecheck.core.rate_limiter import RateLimiter
from profilecheck.core.scoring import build_result, degraded_result
from profilecheck.core.summary import summarize
from profilecheck.exceptions import InvalidIdentifierError, UnsupportedPlatformError
from profilecheck.logging import configure_logging, get_logger
from profilecheck.models.request import Platform, SearchCriteria, VerificationRequest
from profilecheck.models.result import VerificationReport, VerificationResult
from profilecheck.platforms.base import PlatformScraper

SCRAPE_FAILED = "Failed to scrape profile data"


def dynamic_batch_size(total: int) -> int:
    """
    Batch size for a request list of `total` items.

    Examples:
        10 -> 8
        30 -> 15
        100 -> 25
    """
    if total <= 10:
        return min(total, 8)
    if total <= 50:
        return 15
    return 25


class BatchOrchestrator:
    """
    Verifies profiles in order-preserving, concurrently processed batches.

    Every request yields exactly one result; failures of any kind become
    degraded results instead of exceptions.

    Example:
        scrapers = build_scrapers(config, {Platform.INSTAGRAM: source})
        async with BatchOrchestrator(scrapers, config) as orchestrator:
            results = await orchestrator.verify_many(requests)
    """

    def __init__(
        self,
        scrapers: dict[Platform, PlatformScraper],
        config: VerifierConfig | None = None,
        rate_limiter: RateLimiter | None = None,
        current_year: int | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize orchestrator.

        Args:
            scrapers: Scraper per platform
            config: VerifierConfig instance, uses defaults if None
            rate_limiter: Shared limiter, a new one is created if None
            current_year: Year handed to the age estimator (defaults to now)
            sleep: Coroutine used for inter-batch pauses
        """
        self.config = config or VerifierConfig()
        self.scrapers = dict(scrapers)
        self.rate_limiter = rate_limiter or RateLimiter(self.config.rate_limit_interval_ms)
        self.current_year = current_year
        self._sleep = sleep
        self._log = get_logger("orchestrator")

    async def __aenter__(self) -> "BatchOrchestrator":
        """Async context manager entry - configure logging."""
        configure_logging(self.config)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        pass

    def batch_pause_seconds(self, batch_size: int) -> float:
        """Pause after a batch of `batch_size`; 0 for batches under 15."""
        if batch_size < 15:
            return 0.0
        pause_ms = min(
            self.config.batch_pause_cap_ms,
            batch_size * self.config.batch_pause_per_profile_ms,
        )
        return max(pause_ms, 0) / 1000

    async def verify(self, request: VerificationRequest) -> VerificationResult:
        """
        Verify a single profile. Never raises.

        Args:
            request: Identifier, platform and criteria

        Returns:
            VerificationResult (degraded if anything failed)
        """
        self._log.info(
            "verification_start",
            identifier=request.profile_identifier,
            platform=request.platform.value,
        )
        try:
            return await self._verify(request)
        except Exception as e:
            self._log.error(
                "verification_failed",
                identifier=request.profile_identifier,
                error=str(e),
                error_type=type(e).__name__,
            )
            return degraded_result(request, str(e) or type(e).__name__)

    async def _verify(self, request: VerificationRequest) -> VerificationResult:
        scraper = self.scrapers.get(request.platform)
        if scraper is None:
            raise UnsupportedPlatformError(f"Unsupported platform: {request.platform.value}")

        try:
            info = scraper.resolve(request.profile_identifier)
        except InvalidIdentifierError as e:
            self._log.warning(
                "invalid_identifier",
                identifier=request.profile_identifier,
                reasons=e.reasons,
                requires_resolution=e.requires_resolution,
            )
            return degraded_result(request, str(e))

        await self.rate_limiter.acquire(request.platform.value)

        start = time.perf_counter()
        try:
            profile = await asyncio.wait_for(
                scraper.scrape(info.username),
                timeout=self.config.scrape_timeout_seconds,
            )
        except asyncio.TimeoutError:
            self._log.warning(
                "scrape_timeout",
                username=info.username,
                timeout_seconds=self.config.scrape_timeout_seconds,
            )
            return degraded_result(
                request, f"Scrape timed out after {self.config.scrape_timeout_seconds:g}s"
            )

        if profile is None:
            return degraded_result(request, SCRAPE_FAILED)

        analysis = analyze_profile(profile, request.criteria, self.current_year)
        result = build_result(request, profile, analysis)
        self._log.info(
            "verification_complete",
            username=info.username,
            overall_score=result.overall_score,
            verified=result.verified,
            duration_ms=round((time.perf_counter() - start) * 1000, 1),
        )
        return result

    async def _run_batch(self, batch: list[VerificationRequest]) -> list[VerificationResult]:
        outcomes = await asyncio.gather(
            *(self.verify(request) for request in batch),
            return_exceptions=True,
        )
        results = []
        for request, outcome in zip(batch, outcomes):
            if isinstance(outcome, VerificationResult):
                results.append(outcome)
            else:
                results.append(degraded_result(request, str(outcome) or type(outcome).__name__))
        return results

    async def verify_many(self, requests: list[VerificationRequest]) -> list[VerificationResult]:
        """
        Verify profiles in consecutive batches.

        Requests within a batch run concurrently; results come back in
        request order. A failure while processing a batch degrades that
        batch only, earlier and later batches are unaffected.

        Args:
            requests: Verification requests

        Returns:
            One VerificationResult per request, same order
        """
        total = len(requests)
        if total == 0:
            return []

        size = dynamic_batch_size(total)
        total_batches = -(-total // size)
        self._log.info("batch_run_start", total=total, batch_size=size, batches=total_batches)

        results: list[VerificationResult] = []
        for number, start in enumerate(range(0, total, size), start=1):
            batch = requests[start:start + size]
            started = time.perf_counter()
            try:
                batch_results = await self._run_batch(batch)
            except Exception as e:
                self._log.error("batch_failed", batch=number, error=str(e), error_type=type(e).__name__)
                batch_results = [
                    degraded_result(request, f"Batch processing failed: {e}") for request in batch
                ]
            results.extend(batch_results)

            self._log.info(
                "batch_complete",
                batch=number,
                of=total_batches,
                size=len(batch),
                verified=sum(1 for r in batch_results if r.verified),
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )

            pause = self.batch_pause_seconds(size)
            if start + size < total and pause > 0:
                self._log.debug("batch_pause", pause_ms=round(pause * 1000))
                await self._sleep(pause)

        self._log.info(
            "batch_run_complete",
            total=total,
            verified=sum(1 for r in results if r.verified),
        )
        return results

    async def verify_report(
        self,
        requests: list[VerificationRequest],
        criteria: SearchCriteria | None = None,
    ) -> VerificationReport:
        """
        Verify profiles and summarize the outcome.

        Args:
            requests: Verification requests
            criteria: Criteria used for recommendations (defaults to the first request's)

        Returns:
            VerificationReport with results and summary
        """
        start = time.perf_counter()
        results = await self.verify_many(requests)
        elapsed_ms = (time.perf_counter() - start) * 1000
        if criteria is None and requests:
            criteria = requests[0].criteria
        return VerificationReport(
            results=results,
            summary=summarize(results, criteria, elapsed_ms),
            generated_at=datetime.now(),
        )
