from pathlib import Path

from typer.testing import CliRunner

from ldoc_gen.cli import app

runner = CliRunner()


def test_converts_project(lua_project: Path, tmp_path: Path) -> None:
    out = tmp_path / "docs"

    result = runner.invoke(app, ["--path", str(lua_project), "--out-dir", str(out)])

    assert result.exit_code == 0
    assert "Converted 1 files, 1 failed" in result.stdout
    assert (out / ".ldoc_gen" / "counter.lua").read_text(encoding="utf-8") == (
        "\n---A counter.\n"
        "---\n"
        "---@module Counter\n"
        "local Counter = {}\n"
        "\n---Bump the counter.\n"
        "---@tparam integer|nil by\n"
        "function Counter:bump(by) end\n"
    )


def test_config_file(lua_project: Path, tmp_path: Path) -> None:
    config_path = lua_project / "ldoc.yaml"
    config_path.write_text("source_dir: .\nout_dir: .\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config_path)])

    assert result.exit_code == 0
    assert (lua_project / ".ldoc_gen" / "counter.lua").exists()


def test_missing_source_dir_fails(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["--path", str(tmp_path / "missing"), "--out-dir", str(tmp_path)]
    )

    assert result.exit_code == 1
    assert "Conversion aborted" in result.output


def test_invalid_config_fails(tmp_path: Path) -> None:
    config_path = tmp_path / "ldoc.yaml"
    config_path.write_text("extension: lua\n", encoding="utf-8")

    result = runner.invoke(app, ["--config", str(config_path)])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
