"""Command-line interface for Metro Validator."""

import logging
import sys
from pathlib import Path

import click
import colorlog

from . import __version__
from .config import ConfigError, ValidationConfig, load_config
from .output.formatter import format_error, format_header, format_report
from .schema.errors import SnapshotLoadError, SnapshotValidationError
from .schema.loader import load_snapshot
from .validators.base import Status
from .validators.runner import build_report

DB_CANDIDATES = (
    "../../backend/data/metro.db",
    "../backend/data/metro.db",
    "backend/data/metro.db",
    "./metro.db",
)

DEFAULT_PORT = 5001


def find_default_db() -> str:
    """Return the first existing database among the usual locations."""
    for candidate in DB_CANDIDATES:
        path = Path(candidate)
        if path.exists():
            return str(path.resolve())
    return DB_CANDIDATES[0]


def setup_logging(verbose: bool = False, errors_only: bool = False) -> None:
    """Send log records to stderr through a colored handler."""
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = "%(asctime)s:%(levelname)s:%(name)s: %(message)s"
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler(sys.stderr)
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _load_config(config_path: str | None) -> ValidationConfig | None:
    if config_path is None:
        return None
    try:
        return load_config(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)


db_option = click.option(
    "--db",
    "-d",
    "db_path",
    envvar="METRO_DB",
    default=None,
    type=click.Path(dir_okay=False),
    help="Path to the SQLite database or a YAML snapshot (defaults to METRO_DB "
    "or the first metro.db found nearby)",
)

config_option = click.option(
    "--config",
    "config_path",
    envvar="METRO_VALIDATOR_CONFIG",
    default=None,
    type=click.Path(dir_okay=False),
    help="YAML file overriding validation thresholds",
)


@click.group()
@click.version_option(version=__version__)
def main():
    """Metro Validator: integrity checks for metro network data."""
    pass


@main.command()
@db_option
@config_option
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show detailed output")
@click.option("--json", "json_out", is_flag=True, default=False, help="Output results as JSON")
def validate(db_path: str | None, config_path: str | None, verbose: bool, json_out: bool):
    """Validate the metro data in a database.

    Exit codes:
      0 - Validation passed (possibly with warnings)
      1 - Validation failed, or the data could not be loaded
    """
    setup_logging(verbose=verbose, errors_only=json_out)
    output_format = "json" if json_out else "text"
    db_path = db_path or find_default_db()
    config = _load_config(config_path)

    if not json_out:
        click.echo(format_header())

    try:
        snapshot = load_snapshot(db_path)
    except SnapshotLoadError as e:
        click.echo(format_error(f"Failed to load database: {e}", output_format))
        sys.exit(1)
    except SnapshotValidationError as e:
        click.echo(format_error(f"Invalid data in database: {e}", output_format))
        if not json_out:
            for err in e.errors:
                click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(1)

    report = build_report(snapshot, db_path, config)
    click.echo(format_report(report, output_format, verbose=verbose))  # type: ignore

    if report.status == Status.FAIL:
        sys.exit(1)
    sys.exit(0)


@main.command()
@db_option
@config_option
@click.option("--host", default="0.0.0.0", show_default=True, help="Interface to bind")
@click.option(
    "--port",
    "-p",
    envvar="PORT",
    default=DEFAULT_PORT,
    type=int,
    show_default=True,
    help="Server port (PORT env var takes precedence over the default)",
)
def serve(db_path: str | None, config_path: str | None, host: str, port: int):
    """Start the HTTP server for frontend integration.

    Endpoints:
      GET /health        - Health check
      GET /api/validate  - Run validation
    """
    import uvicorn

    from .server import create_app

    setup_logging(verbose=False)
    logging.getLogger("metro_validator").setLevel(logging.INFO)
    db_path = db_path or find_default_db()
    config = _load_config(config_path)

    click.echo(f"  Database: {db_path}")
    click.echo(f"  Server:   http://{host}:{port}")

    app = create_app(db_path, config)
    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    main()
