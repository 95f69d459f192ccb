import json

import pytest

from hardinspect.config import Config
from hardinspect.config_schemas import CHECK_NAMES
from hardinspect.config_schemas.schemas import (
    AnalysisConfig,
    ChecksConfig,
    GeneralConfig,
    HardInspectConfig,
    OutputConfig,
)
from hardinspect.config_store import ConfigStore


def test_general_config_validation():
    with pytest.raises(ValueError):
        GeneralConfig(verbose=True, quiet=True)


def test_output_config_validation():
    with pytest.raises(ValueError):
        OutputConfig(json_indent=-1)


def test_analysis_config_validation():
    with pytest.raises(ValueError):
        AnalysisConfig(max_file_size_mb=0)


def test_checks_config_is_ignored():
    checks = ChecksConfig(ignore_pie=True)
    assert checks.is_ignored("pie") is True
    assert checks.is_ignored("relro") is False
    with pytest.raises(KeyError):
        checks.is_ignored("aslr")


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(TypeError):
        HardInspectConfig.from_dict({"checks": {"ignore_aslr": True}})
    with pytest.raises(TypeError):
        HardInspectConfig.from_dict(["not", "a", "dict"])


def test_config_defaults(tmp_path):
    config = Config(str(tmp_path / "missing.json"))
    assert config.typed_config.output.json_indent == 2
    assert config.ignored_checks == []
    assert config.typed_config == HardInspectConfig()
    assert config.typed_config.analysis.max_file_size_mb == 512


def test_config_loads_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"checks": {"ignore_pie": True}, "output": {"color": True}}))

    config = Config(str(path))
    assert config.ignored_checks == ["pie"]
    assert config.typed_config.output.color is True
    assert config.typed_config.output.json_indent == 2


def test_config_rejects_invalid_file_values(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"analysis": {"max_file_size_mb": 0}}))
    with pytest.raises(ValueError):
        Config(str(path))


def test_config_ignores_unknown_sections(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"plugins": {"enabled": True}}))
    config = Config(str(path))
    assert config.config["plugins"] == {"enabled": True}
    assert config.typed_config == HardInspectConfig()


def test_apply_overrides(tmp_path):
    config = Config(str(tmp_path / "config.json"))
    config.apply_overrides({"checks": {"ignore_bind_now": True, "ignore_relro": True}})
    assert config.ignored_checks == ["relro", "bind_now"]

    with pytest.raises(ValueError):
        config.apply_overrides({"output": {"json_indent": -2}})


def test_config_store_bad_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert ConfigStore.load(str(path)) is None


def test_config_store_non_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    assert ConfigStore.load(str(path)) is None


def test_check_names_cover_every_ignore_flag():
    assert {f"ignore_{name}" for name in CHECK_NAMES} == set(ChecksConfig().__dict__)
