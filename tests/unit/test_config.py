# tests/unit/test_config.py

from pathlib import Path

import pytest
from pydantic import ValidationError

from ldoc_gen.config import DEFAULT_OUTPUT_DIR_NAME, ConverterConfig, load_config


class TestConverterConfig:
    def test_defaults(self) -> None:
        config = ConverterConfig()

        assert config.source_dir == Path(".")
        assert config.extension == ".lua"
        assert config.strict_parse is True
        assert config.output_path == Path(".") / DEFAULT_OUTPUT_DIR_NAME

    @pytest.mark.parametrize("extension", ["lua", ".", ""])
    def test_rejects_bad_extension(self, extension: str) -> None:
        with pytest.raises(ValueError, match="extension"):
            ConverterConfig(extension=extension)

    @pytest.mark.parametrize("name", ["", "a/b"])
    def test_rejects_nested_output_dir_name(self, name: str) -> None:
        with pytest.raises(ValueError, match="output_dir_name"):
            ConverterConfig(output_dir_name=name)


class TestLoadConfig:
    def test_no_file_no_overrides(self) -> None:
        assert load_config() == ConverterConfig()

    def test_reads_yaml_relative_to_file(self, tmp_path: Path) -> None:
        config_path = tmp_path / "conf" / "ldoc.yaml"
        config_path.parent.mkdir()
        config_path.write_text(
            "source_dir: ../lua\nout_dir: /tmp/docs\nextension: .luau\n",
            encoding="utf-8",
        )

        config = load_config(config_path)

        assert config.source_dir == tmp_path / "conf" / ".." / "lua"
        assert config.out_dir == Path("/tmp/docs")
        assert config.extension == ".luau"

    def test_overrides_win_and_none_is_ignored(self, tmp_path: Path) -> None:
        config_path = tmp_path / "ldoc.yaml"
        config_path.write_text("extension: .luau\nstrict_parse: false\n")

        config = load_config(config_path, extension=".lua", source_dir=None)

        assert config.extension == ".lua"
        assert config.strict_parse is False
        assert config.source_dir == Path(".")

    def test_empty_file(self, tmp_path: Path) -> None:
        config_path = tmp_path / "ldoc.yaml"
        config_path.write_text("")

        assert load_config(config_path) == ConverterConfig()

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        config_path = tmp_path / "ldoc.yaml"
        config_path.write_text("colour: blue\n")

        with pytest.raises(ValidationError):
            load_config(config_path)

    def test_non_mapping_rejected(self, tmp_path: Path) -> None:
        config_path = tmp_path / "ldoc.yaml"
        config_path.write_text("- one\n- two\n")

        with pytest.raises(ValueError, match="must contain a mapping"):
            load_config(config_path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")
