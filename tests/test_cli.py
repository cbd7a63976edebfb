# tests/test_cli.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskpal.cli import main as cli_main
from taskpal.cli.bootstrap import create_interpreter
from taskpal.config import Settings


def _settings(data_dir: Path) -> Settings:
    return Settings(
        app_name="Duke",
        log_level="INFO",
        file_logging=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.txt",
        log_dir=data_dir,
    )


@pytest.fixture()
def quiet_main(monkeypatch) -> list[object]:
    """
    Keep main() from reconfiguring root logging and from reading stdin.
    Returns the list of interpreters handed to the console loop.
    """
    started: list[object] = []
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(cli_main, "run_console_loop", started.append)
    return started


def test_create_interpreter_makes_data_dir(tmp_path: Path) -> None:
    settings = _settings(tmp_path / "fresh" / "data")
    interp = create_interpreter(settings=settings)
    assert settings.data_dir.is_dir()
    assert interp.tasks.count() == 0


def test_create_interpreter_loads_existing_tasks(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    settings.tasks_path.write_text("T|1|read book|\nD|0|Submit|2024-03-15\n", "utf-8")

    interp = create_interpreter(settings=settings)

    assert [t.render() for t in interp.tasks] == [
        "[T][X] read book",
        "[D][ ] Submit (by: Mar 15 2024)",
    ]


def test_main_exits_with_status_1_on_corrupt_store(
    tmp_path: Path, monkeypatch, quiet_main: list[object]
) -> None:
    settings = _settings(tmp_path)
    settings.tasks_path.write_text("X|0|unknown kind|\n", "utf-8")
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)

    with pytest.raises(SystemExit) as exc:
        cli_main.main()

    assert exc.value.code == 1
    assert quiet_main == []


def test_main_reads_settings_from_env(
    tmp_path: Path, monkeypatch, quiet_main: list[object]
) -> None:
    monkeypatch.setenv("TASKPAL_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKPAL_TASKS_PATH", str(tmp_path / "tasks.txt"))
    monkeypatch.setenv("TASKPAL_FILE_LOGGING", "false")
    monkeypatch.setattr(cli_main, "get_settings", Settings.from_env)
    (tmp_path / "tasks.txt").write_text("E|0|party|Sat 8pm\n", "utf-8")

    cli_main.main()

    assert len(quiet_main) == 1
    assert quiet_main[0].tasks.get(1).render() == "[E][ ] party (at: Sat 8pm)"
