from __future__ import annotations

import codecs
import os
from dataclasses import dataclass

DEFAULT_ENCODING = "utf-8"
DEFAULT_OUTPUT_FORMAT = "text"
DEFAULT_ERROR_POLICY = "skip"
SUPPORTED_OUTPUT_FORMATS = {"text", "json", "srt", "vtt"}
SUPPORTED_ERROR_POLICIES = {"skip", "abort"}


@dataclass(frozen=True)
class AppConfig:
    encoding: str
    output_format: str
    error_policy: str


def resolve_encoding(value: str | None = None) -> str:
    encoding = value or os.getenv("CUETEXT_ENCODING") or DEFAULT_ENCODING
    try:
        return codecs.lookup(encoding.strip()).name
    except LookupError as exc:
        raise ValueError(f"Unsupported encoding '{encoding}'.") from exc


def normalize_output_format(value: str) -> str:
    fmt = value.strip().lower()
    if fmt not in SUPPORTED_OUTPUT_FORMATS:
        raise ValueError(
            f"Unsupported output format '{value}'. Allowed: {sorted(SUPPORTED_OUTPUT_FORMATS)}"
        )
    return fmt


def normalize_error_policy(value: str | None = None) -> str:
    raw = value or os.getenv("CUETEXT_ON_ERROR") or DEFAULT_ERROR_POLICY
    policy = raw.strip().lower()
    if policy not in SUPPORTED_ERROR_POLICIES:
        raise ValueError(
            f"Unsupported error policy '{raw}'. Allowed: {sorted(SUPPORTED_ERROR_POLICIES)}"
        )
    return policy


def build_app_config(
    *,
    encoding: str | None = None,
    output_format: str = DEFAULT_OUTPUT_FORMAT,
    error_policy: str | None = None,
) -> AppConfig:
    return AppConfig(
        encoding=resolve_encoding(encoding),
        output_format=normalize_output_format(output_format),
        error_policy=normalize_error_policy(error_policy),
    )
