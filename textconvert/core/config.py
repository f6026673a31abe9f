"""Configuration management for textconvert."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from textconvert.core.types import ConversionId
from textconvert.utils import Constants, expand_file_path


class Config(BaseModel):
    """Configuration for a conversion or analysis run."""

    conversion: ConversionId | None = Field(None, description="Conversion to apply")
    analyze: bool = Field(False, description="Produce an analysis report")
    list_conversions: bool = Field(False, description="List available conversions")

    inputs: list[str] = Field(default_factory=list, description="Input text files")
    text: str | None = Field(None, description="Literal input text")
    output: str | None = None
    output_format: Literal["text", "json", "yaml"] = Field("text", description="Report format")

    history_size: int = Field(Constants.HISTORY_CAPACITY, ge=1)
    show_history: bool = False

    verbose: bool = False
    debug: bool = False
    log_file: str | None = None

    @field_validator("inputs", mode="before")
    @classmethod
    def parse_path_list(cls, v):
        """Parse comma-separated string or array into a list of paths."""
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if not (self.conversion or self.analyze or self.list_conversions):
            raise ValueError("one of conversion, analyze or list_conversions is required")
        if self.text is not None and self.inputs:
            raise ValueError("text and inputs cannot be used together")
        return self


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "conversion": get_value("conversion", None),
        "analyze": cli_args.analyze or json_config.get("analyze", False),
        "list_conversions": cli_args.list_conversions
        or json_config.get("list_conversions", False),
        "inputs": get_value("inputs", []),
        "text": get_value("text", None),
        "output": get_value("output", None),
        "output_format": get_value("output_format", "text"),
        "history_size": get_value("history_size", Constants.HISTORY_CAPACITY),
        "show_history": cli_args.show_history or json_config.get("show_history", False),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
        "log_file": get_value("log_file", None),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
