from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import UTC, datetime

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from result_feed.db.enums import ResultStatusEnum
from result_feed.db.models.result_event_mapping import ResultEventMapping
from result_feed.db.repos.event_id_map_repo import EventIdMapRepository
from result_feed.db.repos.result_event_mapping_repo import ResultEventMappingRepository
from result_feed.ingestion.providers.base.adapter import ResultsProvider
from result_feed.ingestion.providers.base.errors import ProviderError
from result_feed.results.errors import MappingFailed, StoreUnavailable
from result_feed.results.gate import can_apply_update
from result_feed.results.mapper import map_results
from result_feed.results.outcome import classify
from result_feed.results.types import ResultEvent

RETRIEVE_RESULT_API_EXCEPTION = "Error retrieving results from provider"
DATE_PARSING_EXCEPTION = "Error parsing provider result dates"


@dataclass(frozen=True)
class RetrieveResultsOutcome:
    events: list[ResultEvent] = field(default_factory=list)
    status_code: ResultStatusEnum = ResultStatusEnum.OK
    result_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status_code == ResultStatusEnum.OK


@dataclass
class UpdateResultsSummary:
    comp_type: str
    events_seen: int = 0
    events_completed: int = 0
    applied: int = 0
    skipped: int = 0
    unmapped: int = 0
    status_code: ResultStatusEnum = ResultStatusEnum.OK
    result_message: str | None = None


class ResultService:
    """Fetch, map, classify and settle provider results.

    The session and provider are injected; the service never builds its own. Store-only
    operations (completed results, reset) can run without a provider.
    """

    def __init__(self, session: Session, provider: ResultsProvider | None = None) -> None:
        self.session = session
        self.provider = provider
        self.mappings = ResultEventMappingRepository(session)
        self.event_ids = EventIdMapRepository(session)

    # -----------------------------
    # Read side
    # -----------------------------

    def _fetch_and_map(self, comp_type: str) -> RetrieveResultsOutcome:
        if self.provider is None:
            raise RuntimeError("ResultService was built without a results provider")
        try:
            raw = self.provider.fetch_results(comp_type)
        except ProviderError as e:
            logger.error("Provider call failed comp_type={} error={}", comp_type, e)
            return RetrieveResultsOutcome(
                status_code=ResultStatusEnum.PROVIDER_UNAVAILABLE,
                result_message=f"{RETRIEVE_RESULT_API_EXCEPTION}: {e}",
            )

        try:
            events = map_results(raw)
        except MappingFailed as e:
            logger.error("Mapping failed comp_type={} records={} error={}", comp_type, len(raw), e)
            return RetrieveResultsOutcome(
                status_code=ResultStatusEnum.MAPPING_FAILED,
                result_message=f"{DATE_PARSING_EXCEPTION}: {e}",
            )

        logger.info("Mapped {} results for comp_type={}", len(events), comp_type)
        return RetrieveResultsOutcome(events=events)

    def retrieve_results(self, comp_type: str) -> RetrieveResultsOutcome:
        """Latest provider results for a competition, annotated with internal event ids."""

        outcome = self._fetch_and_map(comp_type)
        if not outcome.ok or not outcome.events:
            return outcome

        try:
            ids = self.event_ids.event_ids_by_api_event_id(
                e.api_event_id for e in outcome.events if e.api_event_id
            )
        except SQLAlchemyError as e:
            logger.exception("Event id lookup failed comp_type={}", comp_type)
            raise StoreUnavailable(str(e)) from e

        events = [
            dataclasses.replace(e, event_id=ids.get(e.api_event_id or ""))
            for e in outcome.events
        ]
        return dataclasses.replace(outcome, events=events)

    def retrieve_completed_results(self) -> list[ResultEventMapping]:
        try:
            return self.mappings.list_completed()
        except SQLAlchemyError as e:
            logger.exception("Completed results lookup failed")
            raise StoreUnavailable(str(e)) from e

    # -----------------------------
    # Write side
    # -----------------------------

    def update_results(self, comp_type: str, *, now: datetime | None = None) -> UpdateResultsSummary:
        """Settle every completed provider event whose mapping row is still open.

        Provider and mapping failures are reported in the summary. Store failures
        roll back and raise StoreUnavailable; the next cycle retries.
        """

        summary = UpdateResultsSummary(comp_type=comp_type)
        fetched = self._fetch_and_map(comp_type)
        summary.status_code = fetched.status_code
        summary.result_message = fetched.result_message
        if not fetched.ok:
            return summary

        summary.events_seen = len(fetched.events)
        updated_at = now or datetime.now(tz=UTC)

        try:
            for event in fetched.events:
                home_score, away_score = event.home_score, event.away_score
                if not event.completed or home_score is None or away_score is None:
                    continue
                if not event.api_event_id:
                    continue
                summary.events_completed += 1

                mapping = self.mappings.get_by_api_event_id(event.api_event_id)
                if mapping is None:
                    summary.unmapped += 1
                    logger.debug("No mapping for api_event_id={}", event.api_event_id)
                    continue

                if not can_apply_update(mapping):
                    summary.skipped += 1
                    continue

                outcome = classify(home_score, away_score)

                applied = self.mappings.apply_result_if_open(
                    mapping,
                    score=event.score or f"{home_score}-{away_score}",
                    outcome=outcome.value,
                    updated_at=updated_at,
                )
                self.session.commit()

                if applied:
                    summary.applied += 1
                    logger.info(
                        "Applied result event_id={} api_event_id={} score={} outcome={}",
                        mapping.event_id,
                        event.api_event_id,
                        mapping.score,
                        mapping.outcome,
                    )
                else:
                    summary.skipped += 1
                    logger.info(
                        "Result already applied by another cycle api_event_id={}",
                        event.api_event_id,
                    )
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("Result store failed during update comp_type={}", comp_type)
            raise StoreUnavailable(str(e)) from e

        logger.info(
            "Result update comp_type={} seen={} completed={} applied={} skipped={} unmapped={}",
            comp_type,
            summary.events_seen,
            summary.events_completed,
            summary.applied,
            summary.skipped,
            summary.unmapped,
        )
        return summary

    def reset_result(self, api_event_id: str) -> bool:
        """Re-open a settled row. Returns False if no row has that provider id."""

        try:
            mapping = self.mappings.get_by_api_event_id(api_event_id)
            if mapping is None:
                return False
            self.mappings.reset(mapping)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("Result store failed during reset api_event_id={}", api_event_id)
            raise StoreUnavailable(str(e)) from e

        logger.warning("Reset result event_id={} api_event_id={}", mapping.event_id, api_event_id)
        return True
