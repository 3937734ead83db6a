"""Tests for config.py: suite options parsing."""

from __future__ import annotations

from pathlib import Path

import pydantic
import pytest

from mutkit.config import SuiteConfig, configure, load_config
from mutkit.errors import ConfigurationError


def _sink(message: str | None = None, status: bool | None = None) -> None:
    pass


def test_defaults() -> None:
    cfg = configure()
    assert cfg.name == "mut"
    assert cfg.abort_on_errors is True
    assert cfg.auto_flush is True
    assert cfg.skip_success is True
    assert cfg.output_sink is None
    assert cfg.prefix == "mut: "


def test_none_means_defaults() -> None:
    assert configure(None) == SuiteConfig()
    assert configure(None) == configure({})


def test_camel_case_keys() -> None:
    cfg = configure(
        {"name": "Sample", "abortOnErrors": False, "autoFlush": False, "skipSuccess": False, "cbOut": _sink}
    )
    assert cfg.abort_on_errors is False
    assert cfg.auto_flush is False
    assert cfg.skip_success is False
    assert cfg.output_sink is _sink


def test_snake_case_keys() -> None:
    cfg = configure({"abort_on_errors": False, "output_sink": _sink})
    assert cfg.abort_on_errors is False
    assert cfg.output_sink is _sink


def test_output_sink_key() -> None:
    assert configure({"outputSink": _sink}).output_sink is _sink


def test_wrong_types_fall_back_to_defaults() -> None:
    cfg = configure({"name": 42, "abortOnErrors": "no", "autoFlush": 0, "cbOut": "print"})
    assert cfg.name == "mut"
    assert cfg.abort_on_errors is True
    assert cfg.auto_flush is True
    assert cfg.output_sink is None


def test_empty_name_has_no_prefix() -> None:
    assert configure({"name": ""}).prefix == ""


def test_unknown_keys_are_ignored() -> None:
    assert configure({"colour": "red"}).name == "mut"


@pytest.mark.parametrize("options", ["nope", 3, ["name"], True])
def test_non_mapping_is_rejected(options: object) -> None:
    with pytest.raises(ConfigurationError, match="mapping"):
        configure(options)


def test_configuration_error_is_type_error() -> None:
    with pytest.raises(TypeError):
        configure("nope")


def test_existing_config_is_reused() -> None:
    cfg = SuiteConfig(name="x")
    assert configure(cfg) is cfg


def test_config_is_frozen() -> None:
    cfg = configure()
    with pytest.raises(pydantic.ValidationError):
        cfg.auto_flush = False  # type: ignore[misc]


class TestLoadConfig:
    def test_reads_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "suite.yml"
        path.write_text("name: nightly\nautoFlush: false\nskip_success: false\n")
        cfg = load_config(str(path))
        assert cfg.name == "nightly"
        assert cfg.auto_flush is False
        assert cfg.skip_success is False
        assert cfg.abort_on_errors is True

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_config(str(path)) == SuiteConfig()

    def test_list_document_is_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yml"
        path.write_text("- name\n")
        with pytest.raises(ConfigurationError):
            load_config(str(path))
