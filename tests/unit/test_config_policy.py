from __future__ import annotations

import pytest

from cuetext.infra.config import (
    build_app_config,
    normalize_error_policy,
    normalize_output_format,
    resolve_encoding,
)


def test_build_app_config_defaults(monkeypatch) -> None:
    monkeypatch.delenv("CUETEXT_ENCODING", raising=False)
    monkeypatch.delenv("CUETEXT_ON_ERROR", raising=False)
    config = build_app_config()
    assert config.encoding == "utf-8"
    assert config.output_format == "text"
    assert config.error_policy == "skip"


def test_environment_overrides_defaults(monkeypatch) -> None:
    monkeypatch.setenv("CUETEXT_ENCODING", "latin-1")
    monkeypatch.setenv("CUETEXT_ON_ERROR", "ABORT")
    config = build_app_config()
    assert config.encoding == "iso8859-1"
    assert config.error_policy == "abort"


def test_explicit_arguments_win_over_environment(monkeypatch) -> None:
    monkeypatch.setenv("CUETEXT_ON_ERROR", "abort")
    assert normalize_error_policy("skip") == "skip"


def test_output_format_is_case_insensitive() -> None:
    assert normalize_output_format(" JSON ") == "json"


def test_unsupported_values_are_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported output format"):
        normalize_output_format("ass")
    with pytest.raises(ValueError, match="Unsupported error policy"):
        normalize_error_policy("retry")
    with pytest.raises(ValueError, match="Unsupported encoding"):
        resolve_encoding("not-a-codec")
