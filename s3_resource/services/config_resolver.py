"""
Resolution of the S3 client configuration from resource parameters with a
YAML file fallback.
"""
import os
from abc import ABC, abstractmethod
from dataclasses import asdict
from typing import Any, Dict, Mapping, Optional

import yaml
from loguru import logger

from ..exceptions import ConfigError
from ..models.config import ClientConfig, build_candidate, validate_config
from ..models.data_models import ResourceSpec


FALLBACK_CONFIG_NAME = 'aws_config.yaml'


class FallbackConfigSource(ABC):
    """Source of a flat key/value configuration used when resource parameters are incomplete."""

    @abstractmethod
    def describe(self) -> str:
        """Human readable name of the source, used in log and error messages."""

    @abstractmethod
    def available(self) -> bool:
        """True when the source exists and has content."""

    @abstractmethod
    def load(self) -> Mapping[str, Any]:
        """Return the configuration mapping."""


class YamlConfigFile(FallbackConfigSource):
    """Fallback configuration stored in a YAML file."""

    def __init__(self, path: str):
        self.path = path

    @classmethod
    def beside(cls, main_config_path: str) -> 'YamlConfigFile':
        """Locate aws_config.yaml in the directory of the host's main configuration file."""
        return cls(os.path.join(os.path.dirname(main_config_path), FALLBACK_CONFIG_NAME))

    def describe(self) -> str:
        return self.path

    def available(self) -> bool:
        return os.path.isfile(self.path) and os.path.getsize(self.path) > 0

    def load(self) -> Dict[str, Any]:
        with open(self.path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Failed to parse S3 config file {self.path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"S3 config file {self.path} must contain a mapping")

        # Files written for Ruby agents use symbol keys such as ":region"
        return {str(key).lstrip(':'): value for key, value in data.items()}


class ConfigResolver:
    """
    Produces a validated ClientConfig for a resource.

    Resource parameters win whenever they form a complete configuration; the
    fallback source is consulted only otherwise and is validated against the
    same schema.
    """

    def __init__(self, fallback: Optional[FallbackConfigSource] = None):
        self.fallback = fallback

    def resolve(self, spec: ResourceSpec) -> ClientConfig:
        """
        Resolve the client configuration for a resource.

        Args:
            spec: Resource whose parameters are tried first

        Returns:
            ClientConfig built from the first valid source

        Raises:
            ConfigError: If neither source yields a valid configuration
        """
        candidate = build_candidate(asdict(spec))
        errors = validate_config(candidate)
        if not errors:
            logger.debug("Using S3 config from resource parameters")
            return ClientConfig.from_candidate(candidate)

        logger.debug(f"S3 config from resource parameters not valid: {', '.join(errors)}")

        if self.fallback is None or not self.fallback.available():
            source = self.fallback.describe() if self.fallback else 'none'
            logger.debug(f"S3 config file {source} missing or not readable")
            raise ConfigError("No valid S3 configuration found", errors)

        source = self.fallback.describe()
        logger.debug(f"Using S3 config from file: {source}")

        candidate = build_candidate(self.fallback.load())
        errors = validate_config(candidate)
        if errors:
            raise ConfigError(
                f"Failed to load S3 config from {source}: {', '.join(errors)}",
                errors
            )

        logger.debug("S3 config file loaded")
        return ClientConfig.from_candidate(candidate)
