#!filepath: log_search/cli.py

from typing import Optional

import typer
from rich import print
from rich.markup import escape
from rich.table import Table

from log_search.api import create_app
from log_search.config import AppConfig
from log_search.errors import LogSearchError
from log_search.logger import logs
from log_search.metrics import LatencyTracker
from log_search.parquet_source import load_directory
from log_search.search_engine import SearchEngine

app = typer.Typer(help="In-memory AND search over Parquet log records")


def _build_engine(cfg: AppConfig) -> SearchEngine:
    """
    Load every source, then seal: the engine is read-only from here on.
    """
    if not cfg.source.parquet_dir:
        logs.error("Please provide a Parquet directory using --parquet-dir")
        raise typer.Exit(code=2)

    engine = SearchEngine()
    try:
        load_directory(engine, cfg.source.parquet_dir, cfg.source.columns)
    except LogSearchError as e:
        logs.error(f"Cannot load {cfg.source.parquet_dir}: {e}")
        raise typer.Exit(code=1)
    engine.seal()
    return engine


def _load_config(config: Optional[str], parquet_dir: Optional[str]) -> AppConfig:
    cfg = AppConfig.load(config)
    if parquet_dir:
        cfg.source.parquet_dir = parquet_dir
    logs.configure(cfg.log)
    return cfg


@app.command()
def serve(
    parquet_dir: Optional[str] = typer.Option(None, "--parquet-dir", help="Directory containing Parquet files"),
    host: Optional[str] = typer.Option(None, help="Bind address"),
    port: Optional[int] = typer.Option(None, help="Listen port"),
    config: Optional[str] = typer.Option(None, "--config", help="YAML config file"),
):
    """
    Load all Parquet files and serve GET /search
    """
    cfg = _load_config(config, parquet_dir)
    if host is not None:
        cfg.server.host = host
    if port is not None:
        cfg.server.port = port

    engine = _build_engine(cfg)
    server = create_app(engine, LatencyTracker(), cfg.server)

    logs.info(f"Starting server on {cfg.server.host}:{cfg.server.port}")
    server.run(host=cfg.server.host, port=cfg.server.port, threaded=True)


@app.command()
def query(
    text: str,
    parquet_dir: Optional[str] = typer.Option(None, "--parquet-dir", help="Directory containing Parquet files"),
    limit: int = typer.Option(20, help="Rows to print"),
    config: Optional[str] = typer.Option(None, "--config", help="YAML config file"),
):
    """
    One-shot search without starting the server
    """
    cfg = _load_config(config, parquet_dir)
    engine = _build_engine(cfg)
    resp = engine.search(text)

    table = Table("EventId", "Message", "NanoTimeStamp")
    for record in resp.results[:limit]:
        table.add_row(escape(record.event_id), escape(record.message), escape(record.nano_timestamp))
    print(table)
    print(f"[green]Found {resp.count} results in {resp.time_ms}ms[/green]")


if __name__ == "__main__":
    app()

# python -m log_search.cli serve --parquet-dir data/
