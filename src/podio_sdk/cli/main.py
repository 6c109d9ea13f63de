"""CLI de diagnóstico (Typer).

No forma parte del Core: solo configura logging y expone `doctor`.
"""

from __future__ import annotations

import logging

import typer

from podio_sdk.cli.doctor import app as doctor_app
from podio_sdk.core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="podio-sdk command line tools.")
app.add_typer(doctor_app, name="doctor")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable DEBUG logging."),
) -> None:
    level = "DEBUG" if verbose else AppSettings().log_level.upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run() -> None:
    app()
