"""
Configuration data models for lookfor.

This module defines the schema of the optional YAML configuration file: the
default search options applied when a flag is not given on the command line,
and the logging settings.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .filter_spec import TypeFilter


LOG_LEVELS = ['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG']

DEFAULT_LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


class SearchDefaults(BaseModel):
    """
    Default values for search options.

    Command-line flags always take precedence over these values.

    Attributes:
        hidden: Include dot-prefixed entries
        type: Type filter (file, dir or any)
        max_depth: Maximum traversal depth, None for unbounded
        regex: Interpret --name as a regular expression
    """

    model_config = ConfigDict(extra='forbid')

    hidden: bool = Field(False, description="Include dot-prefixed entries")
    type: TypeFilter = Field(TypeFilter.ANY, description="Type filter")
    max_depth: Optional[int] = Field(None, ge=0, description="Maximum traversal depth")
    regex: bool = Field(False, description="Interpret --name as a regular expression")

    @field_validator('type', mode='before')
    @classmethod
    def validate_type(cls, v) -> TypeFilter:
        """Ensure type is a TypeFilter enum."""
        if isinstance(v, str):
            try:
                return TypeFilter(v.lower())
            except ValueError:
                raise ValueError(f"Invalid type filter: {v}")
        return v

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump()
        data['type'] = self.type.value
        return data


class LoggingConfig(BaseModel):
    """
    Configuration for diagnostic logging on standard error.

    Attributes:
        level: Standard logging level name
        format: logging.Formatter format string
    """

    model_config = ConfigDict(extra='forbid')

    level: str = Field('WARNING', description="Logging level name")
    format: str = Field(DEFAULT_LOG_FORMAT, min_length=1, description="Log record format")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid logging level: {v} (expected one of {', '.join(LOG_LEVELS)})")
        return level

    @field_validator('format')
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Reject format strings logging.Formatter cannot use."""
        try:
            logging.Formatter(v)
        except ValueError as e:
            raise ValueError(f"Invalid logging format: {e}")
        return v

    def get_level(self) -> int:
        """Get the numeric logging level."""
        return getattr(logging, self.level)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class LookforConfig(BaseModel):
    """
    Main configuration class for lookfor.

    Attributes:
        defaults: Default search options
        logging: Logging settings
    """

    model_config = ConfigDict(extra='forbid')

    defaults: SearchDefaults = Field(default_factory=SearchDefaults, description="Default search options")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging settings")

    def validate_configuration(self) -> List[str]:
        """
        Check for settings that are valid but probably not intended.

        Returns:
            List of warning messages
        """
        warnings = []

        if self.defaults.max_depth == 0:
            warnings.append("defaults.max_depth is 0: only the search root itself will be considered")

        if self.defaults.regex:
            warnings.append("defaults.regex is enabled: every --name value will be compiled as a regular expression")

        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary representation."""
        return {
            'defaults': self.defaults.to_dict(),
            'logging': self.logging.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LookforConfig':
        """Create a LookforConfig instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        return (f"LookforConfig(type={self.defaults.type.value}, hidden={self.defaults.hidden}, "
                f"max_depth={self.defaults.max_depth}, log_level={self.logging.level})")
