import json

import pytest

from swissmanager import Tournament
from swissmanager.models import Player
from swissmanager.testing.__main__ import COMMANDS, create_command_parser, main


def test_generate_prints_standings(capsys):
    code = main(["generate", "--players", "6", "--rounds", "3", "--seed", "3"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Player-001" in out
    assert "Ranked by: Points > Win %" in out


def test_generate_json(capsys):
    code = main(
        ["generate", "--players", "5", "--rounds", "3", "--seed", "1", "--json"]
    )

    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert data["config"]["num_players"] == 5
    assert len(data["tournament"]["players"]) == 5


def test_generate_save(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    args = ["generate", "--players", "4", "--rounds", "3", "--seed", "8", "--save"]
    assert main(args) == 0

    saved = tmp_path / "swiss-manager-seed8.json"
    assert Tournament.from_dict(json.loads(saved.read_text())).is_complete


def test_validate_file(tmp_path, capsys):
    tournament = Tournament(
        players=[Player(id=f"p{i}", name=f"P{i}") for i in range(4)], seed=2
    )
    tournament.generate_pairings()
    path = tmp_path / "event.json"
    path.write_text(json.dumps(tournament.to_dict()))

    assert main(["validate", "--file", str(path), "--detailed"]) == 0
    assert "0 violations" in capsys.readouterr().out


def test_validate_rejects_malformed_file(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"players": 3}))

    assert main(["validate", "--file", str(path)]) == 1


def test_benchmark(capsys):
    assert main(["benchmark", "--size", "8", "--iterations", "2", "--seed", "1"]) == 0
    assert "median" in capsys.readouterr().out


def test_every_command_has_a_parser():
    for command in COMMANDS:
        parser = create_command_parser(command)
        assert parser.prog == command


def test_completer_has_both_command_formats():
    pytest.importorskip("prompt_toolkit")
    from swissmanager.testing.__main__ import create_completer

    options = create_completer().options
    for command in COMMANDS:
        assert command in options
        assert f"/{command}" in options
    assert "/help" in options
