from __future__ import annotations

import typer

from result_feed.cli.common import session_scope
from result_feed.db.models.event_id_map import EventIdMap
from result_feed.db.models.result_event_mapping import ResultEventMapping
from result_feed.db.repos.event_id_map_repo import EventIdMapRepository
from result_feed.db.repos.result_event_mapping_repo import ResultEventMappingRepository

app = typer.Typer(help="Seed open result mappings (local development fixtures).")


@app.command("mapping")
def seed_mapping_cmd(
    event_id: int = typer.Option(..., "--event-id", help="Internal event id."),
    api_event_id: str = typer.Option(..., "--api-event-id", help="Provider event id."),
    comp_type: str = typer.Option(..., "--comp-type", help="Competition key (e.g. soccer_epl)."),
) -> None:
    """Insert an open result mapping and its event id correlation if they do not exist."""

    with session_scope() as session:
        mapping_repo = ResultEventMappingRepository(session)
        id_map_repo = EventIdMapRepository(session)

        created: list[str] = []
        if id_map_repo.get(event_id) is None:
            id_map_repo.add(EventIdMap(event_id=event_id, api_event_id=api_event_id), flush=False)
            created.append("event_id_map")

        if mapping_repo.get(event_id) is None:
            mapping_repo.add(
                ResultEventMapping(
                    event_id=event_id,
                    api_event_id=api_event_id,
                    comp_type=comp_type,
                    completed=False,
                ),
                flush=False,
            )
            created.append("result_event_mapping")

    typer.echo(
        f"Seeded event_id={event_id} api_event_id={api_event_id} "
        f"created={','.join(created) or 'nothing'}"
    )
