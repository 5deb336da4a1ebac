from __future__ import annotations

import json

import pytest

from crpt_api.app.cli import app
from crpt_api.infra.schemas import DocumentSchema


URL = "https://ismp.crpt.ru/api/v3/lk/documents/create"


@pytest.fixture
def document_file(tmp_path, sample_document):
    path = tmp_path / "document.json"
    path.write_text(DocumentSchema.from_domain(sample_document).to_json(), encoding="utf-8")
    return path


def test_cli_help_shows_commands(runner):
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "create" in result.output
    assert "render" in result.output


def test_cli_render_prints_request_body(runner, mock_httpx_client, document_file):
    result = runner.invoke(app, ["render", str(document_file), "--signature", "sig", "-g", "shoes"])

    assert result.exit_code == 0
    body = json.loads(result.stdout)
    assert body["product_group"] == "shoes"
    assert body["signature"] == "sig"
    assert json.loads(body["product_document"])["doc_id"] == "doc-1"
    assert mock_httpx_client.calls == []


def test_cli_create_prints_document_id(runner, mock_httpx_client, document_file):
    mock_httpx_client(URL, json_payload={"value": "abc123"})

    result = runner.invoke(app, ["create", str(document_file), "-s", "sig", "--token", "tok", "--limit", "5"])

    assert result.exit_code == 0
    assert "abc123" in result.output
    assert mock_httpx_client.calls[0].headers["Authorization"] == "Bearer tok"


def test_cli_create_reports_api_error(runner, mock_httpx_client, document_file):
    mock_httpx_client(URL, status_code=503, content=b"down")

    result = runner.invoke(app, ["create", str(document_file), "-s", "sig", "--token", "tok"])

    assert result.exit_code == 1
    assert "503" in result.output


def test_cli_create_rejects_zero_limit(runner, mock_httpx_client, document_file):
    result = runner.invoke(app, ["create", str(document_file), "-s", "sig", "--token", "tok", "--limit", "0"])

    assert result.exit_code == 1
    assert mock_httpx_client.calls == []


def test_cli_rejects_invalid_document(runner, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")

    result = runner.invoke(app, ["render", str(bad), "-s", "sig"])

    assert result.exit_code == 1


def test_cli_create_sends_requested_product_group(runner, mock_httpx_client, document_file):
    mock_httpx_client(URL, json_payload={"value": "abc123"})

    result = runner.invoke(app, ["create", str(document_file), "-s", "sig", "--token", "tok", "--product-group", "shoes"])

    assert result.exit_code == 0
    body = json.loads(mock_httpx_client.calls[0].content)
    assert body["product_group"] == "shoes"
