# Copyright 2015, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from didyoumean import envdefault, vocabulary
from didyoumean.__main__ import main
from didyoumean.cli import DidYouMeanCLI
from pathlib import Path
from pytest import CaptureFixture, LogCaptureFixture, MonkeyPatch
from typing import Any, Callable
from unittest.mock import MagicMock

import json
import pytest
import requests

SERVICE_TYPES = ["kafka", "kafka_connect", "pg", "redis", "mysql", "grafana"]


@pytest.fixture(name="config_path")
def fixture_config_path(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    monkeypatch.setattr(envdefault, "DIDYOUMEAN_VOCABULARY", None)
    monkeypatch.setattr(envdefault, "DIDYOUMEAN_REQUEST_TIMEOUT", None)
    return tmp_path / "didyoumean.json"


@pytest.fixture(name="run")
def fixture_run(config_path: Path) -> Callable[..., Any]:
    def run(*args: str) -> int | None:
        return DidYouMeanCLI().run(args=["--config", str(config_path), *args])

    return run


def test_cli_help() -> None:
    with pytest.raises(SystemExit) as excinfo:
        DidYouMeanCLI().run(args=["--help"])
    assert excinfo.value.code == 0


def test_main_help() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0


def test_suggest(run: Callable[..., Any], capsys: CaptureFixture[str]) -> None:
    assert run("suggest", "kakfa", *SERVICE_TYPES) is None
    assert capsys.readouterr().out == "kafka\n"


def test_suggest_nothing_close(run: Callable[..., Any], capsys: CaptureFixture[str]) -> None:
    assert run("suggest", "asdf", *SERVICE_TYPES) is None
    assert capsys.readouterr().out == ""


def test_suggest_json(run: Callable[..., Any], capsys: CaptureFixture[str]) -> None:
    run("suggest", "--json", "color", "xxxxxxxx", "collar", "colour", "color")
    assert json.loads(capsys.readouterr().out) == ["color", "colour", "collar"]


def test_suggest_verbose(run: Callable[..., Any], capsys: CaptureFixture[str]) -> None:
    run("suggest", "-v", "--json", "color", "xxxxxxxx", "collar", "colour", "color")
    assert json.loads(capsys.readouterr().out) == [
        {"distance": 0, "option": "color"},
        {"distance": 1, "option": "colour"},
        {"distance": 2, "option": "collar"},
    ]

    run("suggest", "-v", "ID", "id", "identity")
    out = capsys.readouterr().out.splitlines()
    assert out[0].split() == ["OPTION", "DISTANCE"]
    assert out[2].split() == ["id", "1"]
    assert len(out) == 3


def test_suggest_limit(run: Callable[..., Any], capsys: CaptureFixture[str]) -> None:
    run("suggest", "--limit", "2", "color", "xxxxxxxx", "collar", "colour", "color")
    assert capsys.readouterr().out == "color\ncolour\n"


def test_suggest_invalid_limit(run: Callable[..., Any], caplog: LogCaptureFixture) -> None:
    assert run("suggest", "--limit", "0", "color", "colour") == 1
    assert "Invalid limit value 0" in caplog.text


def test_suggest_limit_from_config(run: Callable[..., Any], config_path: Path, capsys: CaptureFixture[str]) -> None:
    config_path.write_text(json.dumps({"limit": 1}), encoding="utf-8")
    run("suggest", "color", "collar", "colour", "color")
    assert capsys.readouterr().out == "color\n"

    run("suggest", "--limit", "3", "color", "collar", "colour", "color")
    assert capsys.readouterr().out == "color\ncolour\ncollar\n"


def test_suggest_without_options(run: Callable[..., Any], caplog: LogCaptureFixture) -> None:
    assert run("suggest", "kafka") == 1
    assert "No options to compare against" in caplog.text


def test_suggest_from_vocabulary_file(run: Callable[..., Any], tmp_path: Path, capsys: CaptureFixture[str]) -> None:
    path = tmp_path / "service-types.json"
    path.write_text(json.dumps(SERVICE_TYPES), encoding="utf-8")
    run("suggest", "kafkaconnect", "--vocabulary", str(path))
    assert capsys.readouterr().out == "kafka_connect\n"

    # options given as arguments are added to the vocabulary
    run("suggest", "kafkaconnect", "kafka-connect", "--vocabulary", str(path))
    assert capsys.readouterr().out == "kafka-connect\nkafka_connect\n"


def test_suggest_vocabulary_from_config(
    run: Callable[..., Any], tmp_path: Path, config_path: Path, capsys: CaptureFixture[str]
) -> None:
    path = tmp_path / "keys.txt"
    path.write_text("database_url\nsecret_key\n", encoding="utf-8")
    config_path.write_text(json.dumps({"vocabulary": str(path)}), encoding="utf-8")
    run("suggest", "DATABASE_URL")
    assert capsys.readouterr().out == "database_url\n"


def test_suggest_vocabulary_from_environment(
    run: Callable[..., Any], tmp_path: Path, monkeypatch: MonkeyPatch, capsys: CaptureFixture[str]
) -> None:
    path = tmp_path / "keys.txt"
    path.write_text("database_url\nsecret_key\n", encoding="utf-8")
    monkeypatch.setattr(envdefault, "DIDYOUMEAN_VOCABULARY", str(path))
    run("suggest", "secret_kye")
    assert capsys.readouterr().out == "secret_key\n"


def test_suggest_vocabulary_url(
    run: Callable[..., Any], monkeypatch: MonkeyPatch, capsys: CaptureFixture[str]
) -> None:
    session = MagicMock()
    session.get.return_value = MagicMock(ok=True, text="\n".join(SERVICE_TYPES))
    get_requests_session = MagicMock(return_value=session)
    monkeypatch.setattr(vocabulary, "get_requests_session", get_requests_session)

    assert run("--request-timeout", "5", "suggest", "reddis", "--vocabulary", "https://example.com/types") is None
    assert capsys.readouterr().out == "redis\n"
    get_requests_session.assert_called_once_with(timeout=5.0)
    session.get.assert_called_once_with("https://example.com/types")


def test_suggest_vocabulary_url_connection_error(
    run: Callable[..., Any], monkeypatch: MonkeyPatch, caplog: LogCaptureFixture
) -> None:
    session = MagicMock()
    session.get.side_effect = requests.exceptions.ConnectionError("connection refused")
    monkeypatch.setattr(vocabulary, "get_requests_session", MagicMock(return_value=session))

    assert run("suggest", "reddis", "--vocabulary", "https://example.com/types") == 1
    assert "command failed: ConnectionError: connection refused" in caplog.text


def test_suggest_vocabulary_url_read_timeout(
    run: Callable[..., Any], monkeypatch: MonkeyPatch, caplog: LogCaptureFixture
) -> None:
    session = MagicMock()
    session.get.side_effect = requests.exceptions.ReadTimeout("read timed out")
    monkeypatch.setattr(vocabulary, "get_requests_session", MagicMock(return_value=session))

    assert run("--request-timeout", "1", "suggest", "reddis", "--vocabulary", "https://example.com/types") == 1
    assert "command failed: ReadTimeout: read timed out" in caplog.text


def test_suggest_vocabulary_not_utf8(run: Callable[..., Any], tmp_path: Path, caplog: LogCaptureFixture) -> None:
    path = tmp_path / "keys.txt"
    path.write_bytes(b"caf\xe9\nkafka\n")
    assert run("suggest", "kakfa", "--vocabulary", str(path)) == 1
    assert "command failed: VocabularyError: Failed to read vocabulary" in caplog.text


def test_suggest_vocabulary_plain_text_with_brackets(
    run: Callable[..., Any], tmp_path: Path, capsys: CaptureFixture[str]
) -> None:
    path = tmp_path / "keys.txt"
    path.write_text("[section]\nkafka\npg\n", encoding="utf-8")
    assert run("suggest", "kakfa", "--vocabulary", str(path)) is None
    assert capsys.readouterr().out == "kafka\n"


def test_config_not_an_object(run: Callable[..., Any], config_path: Path, caplog: LogCaptureFixture) -> None:
    config_path.write_text("42", encoding="utf-8")
    assert run("suggest", "kakfa", "kafka") == 1
    assert "must contain a JSON object" in caplog.text


def test_invalid_request_timeout(
    run: Callable[..., Any], config_path: Path, caplog: LogCaptureFixture
) -> None:
    config_path.write_text(json.dumps({"request_timeout": "soon"}), encoding="utf-8")
    assert run("suggest", "reddis", "--vocabulary", "https://example.com/types") == 1
    assert "Invalid request_timeout value 'soon'" in caplog.text


def test_distance(run: Callable[..., Any], capsys: CaptureFixture[str]) -> None:
    run("distance", "--json", "ID", "identity", "id", "ID")
    assert json.loads(capsys.readouterr().out) == [
        {"distance": 6, "option": "identity"},
        {"distance": 1, "option": "id"},
        {"distance": 0, "option": "ID"},
    ]

    run("distance", "ab", "ba")
    assert capsys.readouterr().out.splitlines()[2].split() == ["ba", "1"]


def test_check(run: Callable[..., Any], caplog: LogCaptureFixture) -> None:
    assert run("check", "redis", *SERVICE_TYPES) is None
    assert run("check", "reddis", *SERVICE_TYPES) == 1
    assert "command failed: UserError: Unknown value 'reddis'. Did you mean \"redis\"?" in caplog.text


def test_check_without_suggestions(run: Callable[..., Any], caplog: LogCaptureFixture) -> None:
    assert run("check", "asdf", *SERVICE_TYPES) == 1
    assert "Unknown value 'asdf'." in caplog.text
    assert "Did you mean" not in caplog.text


def test_mistyped_command(run: Callable[..., Any], capsys: CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run("sugest", "kakfa", "kafka")
    assert excinfo.value.code == 2
    assert 'Did you mean "suggest"?' in capsys.readouterr().err
