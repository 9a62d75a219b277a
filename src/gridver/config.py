import re
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator, ConfigDict

from . import constants
from .rules.rule import Rule
from .utils.merge import deep_merge
from .exceptions import (
    RuleError,
    ConfigParsingError,
    ConfigFileMissingError,
    ConfigValidationError,
    SourceNotFoundError,
)


logger = logging.getLogger(__name__)

class SourceModel(BaseModel):
    """
        Class Config-Validation Model describe one release source in `sources`
    """
    pattern: str
    constraint: Optional[str] = None
    description: Optional[str] = None
    model_config = ConfigDict(extra="forbid")

    @field_validator('pattern')
    @classmethod
    def check_pattern_compiles(cls, value: str) -> str:
        """Pattern must be a valid regular expression"""
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid pattern '{value}': {e}")
        return value

    @field_validator('constraint')
    @classmethod
    def check_constraint_parses(cls, value: Optional[str]) -> Optional[str]:
        """Constraint must be a valid version rule"""
        if value is None:
            return value
        try:
            Rule(value)
        except RuleError as e:
            raise ValueError(str(e))
        return value

    def rule(self) -> Optional[Rule]:
        return Rule(self.constraint) if self.constraint else None

class ConfigModel(BaseModel):
    """
        Class Config-Validation Model desribe top-level of config
    """
    sources: Dict[str, SourceModel] = Field(default_factory=dict)
    model_config = ConfigDict(extra="forbid")

class Config:
    """
    Loads the optional config.yml on top of the built-in release sources.
    """
    def __init__(self, config_path: Optional[str] = None):
        self.path = config_path
        raw_data: Dict[str, Any] = {'sources': constants.DEFAULT_SOURCES}
        if self.path:
            logger.info(f"Loading configuration from '{self.path}'...")
            # a source set to null in the file disables the built-in one
            raw_data = deep_merge(raw_data, self._load_raw_config())

        logger.debug("Validating configuration structure with Pydantic...")
        try:
            self.model = ConfigModel.model_validate(raw_data)
            logger.debug(f"Configuration model validated successfully: \n{self.model.model_dump_json(indent=2)}")
        except ValidationError as e:
            raise ConfigValidationError(f"Configuration validation failed:\n{e}")

    def _load_raw_config(self) -> Dict[str, Any]:
        try:
            content = Path(self.path).read_text(encoding='utf-8')
            config_data = yaml.safe_load(content)
            if config_data is None:
                return {}
            if not isinstance(config_data, dict):
                raise ConfigParsingError("Configuration file must be a YAML document containing a dictionary.")
            logger.debug(f"Successfully parsed YAML from '{self.path}'.")
            return config_data
        except FileNotFoundError:
            raise ConfigFileMissingError(f"Configuration file not found at: {self.path}")
        except yaml.YAMLError as e:
            raise ConfigParsingError(f"Error parsing YAML file: {e}")

    @property
    def sources(self) -> Dict[str, SourceModel]:
        return self.model.sources

    def source(self, name: str) -> SourceModel:
        try:
            return self.model.sources[name]
        except KeyError:
            known = ", ".join(sorted(self.model.sources))
            raise SourceNotFoundError(f"Unknown release source '{name}'. Known sources: {known}")
