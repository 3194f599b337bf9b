"""Configuration validation utilities."""

import re
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_absolute_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_grid_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate grid parameters.

        The number of symbols is not checked here. An out-of-range count is
        reported by the layout planner when the grid is rendered.
        """
        errors = []

        if "stock_symbols" in params:
            value = params["stock_symbols"]
            if not isinstance(value, (list, tuple)) or not all(
                isinstance(symbol, str) and symbol.strip() for symbol in value
            ):
                errors.append(ValidationError(
                    field="stock_symbols",
                    message="Must be a sequence of non-empty strings",
                    value=value
                ))

        if "chart_url_template" in params:
            value = params["chart_url_template"]
            if (not isinstance(value, str) or "{symbol}" not in value
                    or not _is_absolute_http_url(value)):
                errors.append(ValidationError(
                    field="chart_url_template",
                    message="Must be an absolute http(s) URL containing a {symbol} placeholder",
                    value=value
                ))

        if "background_color" in params:
            value = params["background_color"]
            if not isinstance(value, str) or not _HEX_COLOR.match(value):
                errors.append(ValidationError(
                    field="background_color",
                    message="Must be a #rrggbb or #rrggbbaa color string",
                    value=value
                ))

        if "grid_spacing" in params:
            value = params["grid_spacing"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="grid_spacing",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "debug_mode" in params:
            value = params["debug_mode"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="debug_mode",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_fetch_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate fetch parameters."""
        errors = []

        if "max_concurrent" in params:
            value = params["max_concurrent"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="max_concurrent",
                    message="Must be a positive integer",
                    value=value
                ))

        if "max_retries" in params:
            value = params["max_retries"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="max_retries",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        if "base_delay_ms" in params:
            value = params["base_delay_ms"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="base_delay_ms",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_palette_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate palette colors."""
        errors = []

        for field in ("placeholder_background", "failure_color", "text_color"):
            if field in params:
                value = params[field]
                if not isinstance(value, str) or not _HEX_COLOR.match(value):
                    errors.append(ValidationError(
                        field=field,
                        message="Must be a #rrggbb or #rrggbbaa color string",
                        value=value
                    ))

        if "footer_alpha" in params:
            value = params["footer_alpha"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="footer_alpha",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "grid" in config:
            errors.extend(ConfigValidator.validate_grid_params(config["grid"]))

        if "fetch" in config:
            errors.extend(ConfigValidator.validate_fetch_params(config["fetch"]))

        if "palette" in config:
            errors.extend(ConfigValidator.validate_palette_params(config["palette"]))

        return errors
