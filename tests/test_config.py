import pytest

from salary_estimator.config import load_config


def _write(tmp_path, text: str) -> str:
    p = tmp_path / "config.yaml"
    p.write_text(text, encoding="utf-8")
    return str(p)


def test_empty_file_uses_defaults(tmp_path):
    cfg = load_config(_write(tmp_path, ""))
    assert cfg.api.enabled is True
    assert cfg.api.timeout_seconds == 10
    assert cfg.cache.ttl_seconds == 600
    assert cfg.output.currency == "₪"


def test_values_loaded(tmp_path):
    cfg = load_config(_write(tmp_path, "api:\n  enabled: false\ncache:\n  ttl_seconds: 30\njobs:\n  path: feed.csv\n"))
    assert cfg.api.enabled is False
    assert cfg.cache.ttl_seconds == 30
    assert cfg.jobs.path == "feed.csv"


def test_invalid_values_rejected(tmp_path):
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, "cache:\n  ttl_seconds: 0\n"))
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, "api:\n  timeout_seconds: -1\n"))
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, "api:\n  enabled: true\n  base_url: ''\n"))


def test_blank_base_url_allowed_when_disabled(tmp_path):
    cfg = load_config(_write(tmp_path, "api:\n  enabled: false\n  base_url: ''\n"))
    assert cfg.api.base_url == ""
