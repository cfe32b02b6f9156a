"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class EncoderConfig(BaseSettings):
    """Record encoder configuration."""

    model_config = {"env_prefix": "WAGEFILE_ENCODER_"}

    # Salary parsing falls back to this format when the fixed one fails
    fallback_decimal_separator: str = ","
    fallback_group_separator: str = "."


class OutputConfig(BaseSettings):
    """Output artifact configuration."""

    model_config = {"env_prefix": "WAGEFILE_OUTPUT_"}

    backend: Literal["local", "s3"] = "local"
    directory: str = "."
    trailing_newline: bool = False


class S3Config(BaseSettings):
    """S3 output storage configuration."""

    model_config = {"env_prefix": "WAGEFILE_S3_"}

    bucket: str = "wagefile-submissions"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override
    prefix: str = ""


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "WAGEFILE_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    encoder: EncoderConfig = EncoderConfig()
    output: OutputConfig = OutputConfig()
    s3: S3Config = S3Config()
