from __future__ import annotations

import time

import typer
from loguru import logger

from result_feed.cli.common import build_results_provider, session_scope
from result_feed.core.config import settings
from result_feed.results.errors import InvalidScoreError, StoreUnavailable
from result_feed.results.service import ResultService, UpdateResultsSummary

app = typer.Typer(help="Fetch provider results and settle stored result mappings.")


def _echo_summary(summary: UpdateResultsSummary) -> None:
    typer.echo(
        " ".join(
            [
                f"Updated results {summary.comp_type}:",
                f"status_code={int(summary.status_code)}",
                f"events_seen={summary.events_seen}",
                f"events_completed={summary.events_completed}",
                f"applied={summary.applied}",
                f"skipped={summary.skipped}",
                f"unmapped={summary.unmapped}",
            ]
        )
    )
    if summary.result_message:
        typer.echo(f"  {summary.result_message}")


@app.command("retrieve")
def retrieve_results_cmd(
    comp_type: str = typer.Option(..., "--comp-type", help="Competition key (e.g. soccer_epl)."),
) -> None:
    """Print the latest provider results for a competition without writing anything."""

    provider = build_results_provider()
    try:
        with session_scope() as session:
            outcome = ResultService(session, provider).retrieve_results(comp_type)
    finally:
        provider.close()

    if not outcome.ok:
        typer.echo(f"status_code={int(outcome.status_code)} {outcome.result_message}")
        raise typer.Exit(code=int(outcome.status_code))

    for event in outcome.events:
        typer.echo(
            f"{event.start_time.isoformat()} {event.event_desc} "
            f"score={event.score or '-'} completed={event.completed} event_id={event.event_id}"
        )


@app.command("update")
def update_results_cmd(
    comp_type: str = typer.Option(..., "--comp-type", help="Competition key (e.g. soccer_epl)."),
) -> None:
    """Run one ingestion cycle: fetch, map, classify and apply completed results."""

    provider = build_results_provider()
    try:
        with session_scope() as session:
            summary = ResultService(session, provider).update_results(comp_type)
    finally:
        provider.close()

    _echo_summary(summary)


@app.command("completed")
def completed_results_cmd() -> None:
    """List every settled result mapping."""

    with session_scope() as session:
        rows = ResultService(session).retrieve_completed_results()
        for row in rows:
            typer.echo(
                f"event_id={row.event_id} api_event_id={row.api_event_id} "
                f"comp_type={row.comp_type} score={row.score} outcome={row.outcome}"
            )
        typer.echo(f"completed={len(rows)}")


@app.command("reset")
def reset_result_cmd(
    api_event_id: str = typer.Option(..., "--api-event-id", help="Provider event id to re-open."),
) -> None:
    """Re-open a settled result so the next cycle can apply a corrected score."""

    with session_scope() as session:
        found = ResultService(session).reset_result(api_event_id)

    if not found:
        typer.echo(f"No result mapping for api_event_id={api_event_id}")
        raise typer.Exit(code=1)
    typer.echo(f"Reset api_event_id={api_event_id}")


@app.command("poll")
def poll_results_cmd(
    comp_types: list[str] = typer.Option(
        ..., "--comp-type", help="Competition key; repeat for several competitions."
    ),
    interval_seconds: float | None = typer.Option(
        None,
        "--interval-seconds",
        help="Seconds between cycles (defaults to POLL_INTERVAL_SECONDS).",
    ),
    iterations: int = typer.Option(
        0,
        "--iterations",
        help="Stop after this many cycles (0 runs until interrupted).",
    ),
) -> None:
    """Run ingestion cycles on a fixed interval.

    A store outage or a corrupt provider score abandons that competition's cycle;
    the poller keeps running and retries on the next tick.
    """

    interval = settings.poll_interval_seconds if interval_seconds is None else interval_seconds
    provider = build_results_provider()
    cycle = 0
    try:
        while True:
            cycle += 1
            for comp_type in comp_types:
                try:
                    with session_scope() as session:
                        summary = ResultService(session, provider).update_results(comp_type)
                except StoreUnavailable:
                    logger.error("Cycle {} abandoned for comp_type={}", cycle, comp_type)
                    continue
                except InvalidScoreError as e:
                    logger.error(
                        "Cycle {} abandoned for comp_type={}: corrupt provider score ({})",
                        cycle,
                        comp_type,
                        e,
                    )
                    continue
                _echo_summary(summary)

            if iterations and cycle >= iterations:
                break
            time.sleep(interval)
    finally:
        provider.close()
