"""Tests for the partialdownload command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from torrentctl.cli.main import cli
from torrentctl.client.base import FilePriority

from tests.utils.fake_client import GiB, make_files

pytestmark = [pytest.mark.cli, pytest.mark.chunking]

INFO_HASH = "e447d424dd0e6fba7bf9494008111f3bbb1f56a9"


@pytest.fixture
def client(cli_client):
    cli_client.files[INFO_HASH] = make_files(
        ("a", 300 * GiB), ("b", 300 * GiB), ("c", 300 * GiB)
    )
    return cli_client


def _invoke(*args: str):
    runner = CliRunner()
    return runner.invoke(cli, ["partialdownload", "local", INFO_HASH, *args])


def test_download_first_chunk(client):
    result = _invoke("--chunk-size", "500GiB", "--chunk-index", "0")

    assert result.exit_code == 0, result.output
    assert client.created == ["local"]
    assert client.priority_calls == [
        (INFO_HASH, [0, 1], FilePriority.DOWNLOAD),
        (INFO_HASH, [2], FilePriority.SKIP),
    ]
    assert (
        "Torrent Size: 900GiB (3) / Chunks: 2; DownloadChunkIndex: 0; "
        "DownloadChunkSize: 600GiB (2)"
    ) in result.stdout
    assert client.closed


def test_download_last_chunk_strict(client):
    result = _invoke("--chunk-size", "500G", "--chunk-index", "2", "--strict")

    assert result.exit_code == 0, result.output
    assert client.priority_calls == [
        (INFO_HASH, [2], FilePriority.DOWNLOAD),
        (INFO_HASH, [0, 1], FilePriority.SKIP),
    ]
    assert "Chunks: 3; DownloadChunkIndex: 2; DownloadChunkSize: 300GiB (1)" in result.stdout


def test_original_order(client):
    client.files[INFO_HASH] = make_files(("c", 300 * GiB), ("a", 300 * GiB), ("b", 300 * GiB))

    result = _invoke("--chunk-size", "500GiB", "--original-order")

    assert result.exit_code == 0, result.output
    assert client.priority_calls[0] == (INFO_HASH, [0, 1], FilePriority.DOWNLOAD)


def test_show_all_prints_table_without_mutation(client):
    # Out of range index is fine when only reporting
    result = _invoke("--chunk-size", "500GiB", "--chunk-index", "9", "--all")

    assert result.exit_code == 0, result.output
    assert client.priority_calls == []
    assert "Torrent Size: 900GiB (3) / Chunk Size: 500GiB; All 2 Chunks:" in result.stdout
    assert "Index" in result.stdout
    assert "600GiB" in result.stdout
    assert "300GiB" in result.stdout


def test_chunk_index_out_of_range(client):
    result = _invoke("--chunk-size", "500GiB", "--chunk-index", "5")

    assert result.exit_code != 0
    assert "Invalid chunk index 5. Torrent has 2 chunks" in result.output
    assert client.priority_calls == []
    assert client.closed


def test_strict_file_too_large(client):
    client.files[INFO_HASH] = make_files(("huge.mkv", 1024 * GiB))

    result = _invoke("--chunk-size", "500GiB", "--strict")

    assert result.exit_code != 0
    assert "Torrent can NOT be strictly split to 500GiB chunks" in result.output
    assert "huge.mkv" in result.output
    assert client.priority_calls == []


@pytest.mark.parametrize(
    ("args", "message"),
    [
        (["--chunk-size", "0"], "Invalid chunk size 0"),
        (["--chunk-size", "500GiB", "--chunk-index", "-1"], "Invalid chunk index -1"),
        (["--chunk-size", "lots"], "Invalid size"),
    ],
)
def test_invalid_options_fail_before_contacting_client(client, args, message):
    result = _invoke(*args)

    assert result.exit_code != 0
    assert message in result.output
    assert client.created == []


def test_chunk_size_is_required(client):
    result = _invoke()
    assert result.exit_code == 2
    assert "--chunk-size" in result.output


def test_fetch_failure(client):
    client.fail_contents = ConnectionError("connection refused")

    result = _invoke("--chunk-size", "500GiB")

    assert result.exit_code != 0
    assert "Failed to get client files: connection refused" in result.output


def test_second_priority_call_failure(client):
    client.fail_priority[FilePriority.SKIP] = RuntimeError("rejected")

    result = _invoke("--chunk-size", "500GiB")

    assert result.exit_code != 0
    assert "Failed to set no download files: rejected" in result.output
    assert client.priority_calls == [(INFO_HASH, [0, 1], FilePriority.DOWNLOAD)]
    assert "DownloadChunkIndex" not in result.output


def test_unknown_client_name():
    result = CliRunner().invoke(
        cli, ["partialdownload", "nas", INFO_HASH, "--chunk-size", "1G"]
    )

    assert result.exit_code != 0
    assert "Client not found in configuration: nas" in result.output


def test_close_failure_does_not_mask_fetch_failure(client):
    client.fail_contents = ConnectionError("connection refused")
    client.fail_close = OSError("logout failed")

    result = _invoke("--chunk-size", "500GiB")

    assert result.exit_code == 1
    assert "Failed to get client files: connection refused" in result.output
    assert result.output.count("Error:") == 1
    assert client.closed


def test_close_failure_after_report_is_only_logged(client, tmp_path, monkeypatch):
    log_file = tmp_path / "torrentctl.log"
    monkeypatch.setenv("TORRENTCTL_LOG_FILE", str(log_file))
    client.fail_close = OSError("session [/api/v2/auth/logout] rejected")

    result = _invoke("--chunk-size", "500GiB", "-a")

    assert result.exit_code == 0, result.output
    assert "All 2 Chunks:" in result.stdout
    assert (
        "Failed to close client local: session [/api/v2/auth/logout] rejected"
        in log_file.read_text(encoding="utf-8")
    )
