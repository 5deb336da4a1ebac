from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from pydantic import ValidationError

from .api import CrptClient
from ..core.domain.models import Document
from ..core.errors import CrptApiError
from ..infra.schemas import DocumentSchema


app = typer.Typer(help="CRPT registry client")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log debug output to stderr"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _load_document(path: Path) -> Document:
    """Read a document JSON file (registry product_document shape)."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return DocumentSchema.model_validate(data).to_domain()
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        typer.echo(f"Invalid document {path}: {e}", err=True)
        raise typer.Exit(code=1)


@app.command(help="Print the request body that `create` would send, without sending it.")
def render(
    file: Path = typer.Argument(..., help="Document JSON file"),
    signature: str = typer.Option(..., "--signature", "-s", help="Document signature"),
    product_group: str | None = typer.Option(None, "--product-group", "-g", help="Product group (default: clothes)"),
) -> None:
    document = _load_document(file)
    try:
        with CrptClient(product_group=product_group) as client:
            payload = client.render_request(document, signature)
    except CrptApiError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    print(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command(help="Submit a signed document and print the id assigned by the registry.")
def create(
    file: Path = typer.Argument(..., help="Document JSON file"),
    signature: str = typer.Option(..., "--signature", "-s", help="Document signature"),
    token: str | None = typer.Option(None, "--token", help="Bearer token (default: CRPT_API_TOKEN)"),
    limit: int | None = typer.Option(None, "--limit", help="Requests per window (default: CRPT_API_REQUEST_LIMIT)"),
    window: float | None = typer.Option(None, "--window", help="Window length in seconds"),
    base_url: str | None = typer.Option(None, "--base-url", help="Registry API base URL"),
    product_group: str | None = typer.Option(None, "--product-group", "-g", help="Product group (default: clothes)"),
) -> None:
    document = _load_document(file)
    try:
        with CrptClient(
            token=token,
            request_limit=limit,
            window_seconds=window,
            base_url=base_url,
            product_group=product_group,
        ) as client:
            doc_id = client.create_document(document, signature)
    except CrptApiError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(doc_id)


if __name__ == "__main__":  # pragma: no cover
    app()
