"""Typed configuration schema and loader for the receiptgen package."""

from __future__ import annotations

import os
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, confloat, conint, field_validator, model_validator
from reportlab.pdfbase.pdfmetrics import standardFonts

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ColumnNames(BaseModel):
    """Header names of the columns a receipt needs."""

    first_name: str
    last_name: str
    fee: str

    model_config = ConfigDict(extra="forbid")

    def required(self) -> tuple[str, ...]:
        """Return the required header names in lookup order."""

        return (self.first_name, self.last_name, self.fee)


class InputSettings(BaseModel):
    """Schema of the delimited member file."""

    delimiter: str
    encoding: str
    header_line: conint(ge=1)
    data_rows: conint(ge=1) | None
    columns: ColumnNames
    strip_chars: str
    missing_column: Literal["error", "sentinel"]
    sentinel: str

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_delimiter(self) -> "InputSettings":
        if not self.delimiter:
            raise ValueError("delimiter must not be empty")
        return self


class LayoutSettings(BaseModel):
    """Page geometry and text style; lengths are millimetres."""

    page_width: confloat(gt=0)
    page_height: confloat(gt=0)
    margin: confloat(gt=0)
    line_offset: confloat(gt=0)
    font_name: str
    font_size: conint(ge=1)
    columns: conint(ge=1)
    rows_per_column: conint(ge=1)
    cut_inset: confloat(ge=0)
    line_width: confloat(gt=0)
    logo_path: Path | None = None
    logo_offset_x: float
    logo_scale: confloat(gt=0)
    logo_dpi: confloat(gt=0)

    model_config = ConfigDict(extra="forbid")

    @field_validator("font_name")
    @classmethod
    def _check_font(cls, value: str) -> str:
        if value not in standardFonts:
            raise ValueError(f"unknown font {value!r}; use one of the standard PDF fonts")
        return value

    @property
    def column_width(self) -> float:
        return self.page_width / self.columns

    @property
    def receipts_per_page(self) -> int:
        return self.columns * self.rows_per_column

    @property
    def block_height(self) -> float:
        """Vertical extent of one receipt block including trailing margin."""

        return 2.5 * self.margin + 7 * self.line_offset

    @model_validator(mode="after")
    def _check_grid_fits(self) -> "LayoutSettings":
        needed = self.rows_per_column * self.block_height
        if needed > self.page_height:
            raise ValueError(
                f"{self.rows_per_column} receipts per column need {needed:.2f} mm "
                f"but the page is {self.page_height:.2f} mm high"
            )
        if 2 * self.cut_inset >= self.page_height:
            raise ValueError("cut_inset leaves no room for the vertical cut line")
        return self


class OutputSettings(BaseModel):
    """Where and how the document is written."""

    path: Path
    title: str

    model_config = ConfigDict(extra="forbid")


class ErrorSettings(BaseModel):
    """Exit status policy for fatal errors."""

    file_open_exit_code: conint(ge=0, le=255)

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    input: InputSettings
    layout: LayoutSettings
    output: OutputSettings
    errors: ErrorSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(path: str | os.PathLike[str] | None = None) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML.
    """

    with (
        importlib_resources.files("receiptgen.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"{path}: top level of the config must be a mapping")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    return ConfigModel.model_validate(merged)


__all__ = [
    "ColumnNames",
    "ConfigModel",
    "ErrorSettings",
    "InputSettings",
    "LayoutSettings",
    "OutputSettings",
    "deep_merge_dicts",
    "load_config",
]
