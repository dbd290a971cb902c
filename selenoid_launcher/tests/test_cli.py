from __future__ import annotations

import pytest

from selenoid_launcher import cli


@pytest.fixture
def cli_runner(monkeypatch, tmp_path, fake_runner):
    created = {}

    def _make_runner(**kwargs):
        created.update(kwargs)
        return fake_runner

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "CommandRunner", _make_runner)
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)
    for name in (
        "SELENOID_CONTAINER_NAME",
        "SELENOID_TERMINATE_ON_ERROR",
        "DOCKER_BIN",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    fake_runner.created = created
    return fake_runner


def test_prepare_command_builds_run(cli_runner, browsers_json) -> None:
    rc = cli.main(
        [
            "prepare",
            "--skip-auto-pull",
            "--container-name",
            "X",
            "--selenoid-version",
            "v1",
            "--docker-arg=--mem",
            "--docker-arg=512m",
        ]
    )

    assert rc == 0
    run_command = cli_runner.calls("run")[0]
    image_index = run_command.index("aerokube/selenoid:v1")
    assert run_command[image_index - 2 : image_index] == ["--mem", "512m"]
    assert run_command[run_command.index("--name") + 1] == "X"
    assert cli_runner.calls("pull") == []


def test_prepare_missing_manifest_exits_with_error(cli_runner, capsys) -> None:
    rc = cli.main(["prepare", "--browsers-config", "./nope.json"])

    assert rc == 1
    assert "Unable to find browsers.json at ./nope.json" in capsys.readouterr().err
    assert cli_runner.calls("run") == []


def test_prepare_lenient_mode_exits_zero(cli_runner) -> None:
    rc = cli.main(["prepare", "--browsers-config", "./nope.json", "--no-terminate-on-error"])

    assert rc == 0
    assert len(cli_runner.calls("run")) == 1


def test_environment_settings_are_used(cli_runner, monkeypatch) -> None:
    monkeypatch.setenv("SELENOID_CONTAINER_NAME", "from_env")
    monkeypatch.setenv("DOCKER_BIN", "podman")

    rc = cli.main(["complete"])

    assert rc == 0
    assert cli_runner.commands == [["podman", "rm", "-f", "from_env"]]


def test_global_flags_reach_runner(cli_runner) -> None:
    rc = cli.main(["--dry-run", "complete", "--timeout", "30"])

    assert rc == 0
    assert cli_runner.created == {"dry_run": True, "timeout": 30.0}


def test_command_is_required(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2


def test_log_level_from_env_file_reaches_logging(cli_runner, monkeypatch, tmp_path) -> None:
    (tmp_path / ".env").write_text("LOG_LEVEL=DEBUG\n", encoding="utf-8")
    captured = {}
    monkeypatch.setattr(
        cli, "setup_logging", lambda path=None, level=None: captured.update(level=level)
    )

    rc = cli.main(["complete"])

    assert rc == 0
    assert captured["level"] == "DEBUG"


def test_log_level_flag_wins_over_settings(cli_runner, monkeypatch) -> None:
    captured = {}
    monkeypatch.setattr(
        cli, "setup_logging", lambda path=None, level=None: captured.update(level=level)
    )

    cli.main(["--log-level", "warning", "complete"])

    assert captured["level"] == "warning"


def test_malformed_environment_exits_with_error(cli_runner, monkeypatch, capsys) -> None:
    monkeypatch.setenv("SELENOID_PORT", "abc")

    rc = cli.main(["complete"])

    assert rc == 1
    assert "SELENOID_PORT" in capsys.readouterr().err
    assert cli_runner.commands == []
