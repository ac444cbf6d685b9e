"""minirag CLI - build an in-memory index and query it."""

from __future__ import annotations

from concurrent.futures import CancelledError
from pathlib import Path

import click

from minirag.config import AppConfig, apply_env_overrides, load_config
from minirag.session import Session
from minirag.utils import configure_logging, format_vector, preview

_config_option = click.option(
    "--config", "-c", default=None, help="Configuration file path (YAML or JSON)"
)


def _document_options(f):
    """Options shared by commands that build an index."""
    f = click.option("--progress", is_flag=True, help="Show indexing progress")(f)
    f = click.option(
        "--dimensions", "-d", type=int, default=None, help="Vector dimensions (2-8)"
    )(f)
    f = click.option(
        "--file",
        "-f",
        "file_path",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="Read document from file",
    )(f)
    f = click.option("--text", "-t", default=None, help="Document text")(f)
    return _config_option(f)


def _load(config: str | None) -> AppConfig:
    cfg = apply_env_overrides(load_config(config))
    configure_logging(cfg.logging.level)
    return cfg


def _build_session(
    cfg: AppConfig,
    text: str | None,
    file_path: str | None,
    dimensions: int | None,
    progress: bool,
) -> Session:
    session = Session.from_config(cfg, show_progress=progress)
    if file_path:
        session.set_document(Path(file_path).read_text(encoding="utf-8"))
    elif text is not None:
        session.set_document(text)
    if dimensions is not None:
        session.set_dimensions(dimensions)
    return session


def _print_header(text: str) -> None:
    click.echo(f"\n{'=' * 50}\n{text}\n{'=' * 50}")


@click.group()
def cli():
    """minirag CLI - chunk, embed, index and query a document."""
    pass


@cli.command()
@_document_options
def index(config, text, file_path, dimensions, progress):
    """Build the index and print chunks, vectors and entries."""
    try:
        cfg = _load(config)
        with _build_session(cfg, text, file_path, dimensions, progress) as session:
            _print_header(f"Chunks ({len(session.chunks)})")
            for chunk in session.chunks:
                click.echo(chunk)

            _print_header(f"Vectors ({session.dimensions} dimensions)")
            for vector in session.vectors:
                click.echo(format_vector(vector))

            _print_header("Index")
            for entry in session.index:
                click.echo(f"ID: {entry.id}, Text: {preview(entry.text)}")

    except Exception as e:
        click.echo(f"✗ Indexing failed: {e}", err=True)
        raise click.Abort()


@cli.command()
@click.argument("question")
@click.option("--top-k", "-k", type=int, default=None, help="Number of results")
@_document_options
def query(question, top_k, config, text, file_path, dimensions, progress):
    """Retrieve the top chunks for QUESTION and print the answer."""
    try:
        cfg = _load(config)
        with _build_session(cfg, text, file_path, dimensions, progress) as session:
            result = session.query(question, k=top_k)

            _print_header("Query vector")
            click.echo(format_vector(result.query_vector))

            _print_header(f"Results ({len(result.results)})")
            for r in result.results:
                click.echo(f"ID: {r.id}, Similarity: {r.similarity:.4f}")
                click.echo(f"  {r.text}")

            _print_header("Answer")
            click.echo(result.answer.result())

    except CancelledError:
        click.echo("✗ Answer was cancelled", err=True)
        raise click.Abort()
    except Exception as e:
        click.echo(f"✗ Query failed: {e}", err=True)
        raise click.Abort()


@cli.command()
@_config_option
def validate(config):
    """Validate configuration file."""
    try:
        cfg = _load(config)

        click.echo("✓ Configuration is valid")
        click.echo(f"  Dimensions: {cfg.embedding.dimensions}")
        click.echo(f"  Delimiter: {cfg.chunking.delimiter!r}")
        click.echo(f"  Top k: {cfg.retrieval.top_k}")
        click.echo(f"  Answer delay: {cfg.answer.delay_seconds}s")
        click.echo(f"  Document: {preview(cfg.document, 40)}")

    except Exception as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        raise click.Abort()


@cli.command()
@_config_option
@click.option("--host", default=None, help="Bind host (overrides config)")
@click.option("--port", type=int, default=None, help="Bind port (overrides config)")
def serve(config, host, port):
    """Run the HTTP API."""
    import uvicorn

    from minirag.api.app import create_app

    try:
        cfg = _load(config)
    except Exception as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        raise click.Abort()

    uvicorn.run(
        create_app(cfg),
        host=host or cfg.api.host,
        port=port or cfg.api.port,
    )


def main():
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
