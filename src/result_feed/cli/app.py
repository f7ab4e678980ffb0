from __future__ import annotations

import typer

from result_feed.cli.results import app as results_app
from result_feed.cli.seed import app as seed_app
from result_feed.core.logging import setup_logging

app = typer.Typer(no_args_is_help=True)
app.add_typer(results_app, name="results")
app.add_typer(seed_app, name="seed")


@app.callback()
def main() -> None:
    """Sports result ingestion and settlement."""
    setup_logging()
