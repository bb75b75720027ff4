# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from sitemap_reader.config import ReaderConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,expect_exc",
    [
        ("timeout: 5\nuser_agent: TestAgent/1.0", None),
        (json.dumps({"timeout": 5, "user_agent": "TestAgent/1.0"}), None),
        ("timeout: -1", ValidationError),
        ("unknown_key: 1", ValidationError),
        ("retry_status: [999]", ValidationError),
        ("- just\n- a list", TypeError),
        ("timeout: [unclosed", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, expect_exc):
    suffix = ".json" if content.strip().startswith("{") else ".yaml"
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, ReaderConfig)
        assert cfg.timeout == 5.0
        assert cfg.user_agent == "TestAgent/1.0"
        assert cfg.retry_status == [500, 502, 503, 504]


def test_load_config_default_missing_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = load_config(None)
    assert cfg == ReaderConfig()


def test_load_config_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("retry_times: 0\n", encoding="utf-8")
    assert load_config(None).retry_times == 0


def test_explicit_path_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_unsupported_suffix(tmp_path):
    with pytest.raises(ValueError):
        load_config(write_file(tmp_path, "timeout = 1", ".toml"))


def test_template_dir_not_found(tmp_path):
    cfg_path = write_file(tmp_path, f"template_dir: {tmp_path / 'missing'}", ".yaml")
    with pytest.raises(FileNotFoundError):
        load_config(cfg_path)


def test_config_is_frozen():
    cfg = ReaderConfig()
    with pytest.raises(ValidationError):
        cfg.timeout = 1.0
