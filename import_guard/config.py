"""Configuration system for Import Guard using Pydantic Settings."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .analyzer.groups import RuleGroup, RuleGroups
from .analyzer.tree import AnalyzerSettings
from .errors import ConfigurationError


def _as_list(value: object) -> object:
    if isinstance(value, str):
        return [value]
    if value is None:
        return []
    return value


class ScanConfig(BaseSettings):
    """Which directories are scanned and how files are read."""

    model_config = SettingsConfigDict(env_prefix="IMPORT_GUARD_SCAN_")

    src_dirs: list[Path] = Field(
        default=[Path("src/main/java")],
        description="Source roots, relative to the project root",
    )
    test_dirs: list[Path] = Field(
        default=[Path("src/test/java")],
        description="Test roots, only scanned with include_test_code",
    )
    include_test_code: bool = Field(default=False)
    encoding: str = Field(default="utf-8", description="Encoding of source files")
    parallel_workers: int = Field(
        default=1,
        ge=1,
        description="Number of threads used to scan files",
    )

    @field_validator("src_dirs", "test_dirs", mode="before")
    @classmethod
    def coerce_list(cls, v: object) -> object:
        return _as_list(v)


class RuleGroupConfig(BaseModel):
    """One group of banned imports as written in the configuration file."""

    base_packages: list[str] = Field(default=["**"])
    banned_imports: list[str] = Field(default_factory=list)
    allowed_imports: list[str] = Field(default_factory=list)
    exclusions: list[str] = Field(default_factory=list)
    reason: str | None = None

    @field_validator(
        "base_packages", "banned_imports", "allowed_imports", "exclusions", mode="before"
    )
    @classmethod
    def coerce_list(cls, v: object) -> object:
        return _as_list(v)

    @property
    def has_input(self) -> bool:
        return bool(
            self.banned_imports
            or self.allowed_imports
            or self.exclusions
            or self.reason
            or self.base_packages != ["**"]
        )

    def to_rule_group(self) -> RuleGroup:
        """Parse the patterns; raises PatternSyntaxError or ConfigurationError."""
        return RuleGroup.create(
            base_packages=self.base_packages,
            banned_imports=self.banned_imports,
            allowed_imports=self.allowed_imports,
            exclusions=self.exclusions,
            reason=self.reason,
        )


class AppConfig(BaseSettings):
    """Main application configuration.

    Rules are given either as a single top-level group (``base_packages``,
    ``banned_imports``, ...) or as a ``groups`` list, never both.
    """

    model_config = SettingsConfigDict(
        env_prefix="IMPORT_GUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    scan: ScanConfig = Field(default_factory=ScanConfig)

    # Single group definition
    base_packages: list[str] = Field(default=["**"])
    banned_imports: list[str] = Field(default_factory=list)
    allowed_imports: list[str] = Field(default_factory=list)
    exclusions: list[str] = Field(default_factory=list)
    reason: str | None = None

    groups: list[RuleGroupConfig] = Field(default_factory=list)

    fail_build: bool = Field(default=True, description="Fail when banned imports are found")
    skip: bool = Field(default=False, description="Skip the analysis entirely")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_file: Path | None = Field(default=None)

    @field_validator(
        "base_packages", "banned_imports", "allowed_imports", "exclusions", mode="before"
    )
    @classmethod
    def coerce_list(cls, v: object) -> object:
        return _as_list(v)

    def top_level_group(self) -> RuleGroupConfig:
        return RuleGroupConfig(
            base_packages=self.base_packages,
            banned_imports=self.banned_imports,
            allowed_imports=self.allowed_imports,
            exclusions=self.exclusions,
            reason=self.reason,
        )

    def build_groups(self) -> RuleGroups:
        """Assemble the validated rule groups."""
        single = self.top_level_group()
        if self.groups and single.has_input:
            raise ConfigurationError(
                "Configuration error: you can either define a list of banned import "
                "definitions using 'groups' OR define a single banned import definition "
                "on top level without 'groups' but not both"
            )
        definitions = self.groups or [single]
        return RuleGroups(definition.to_rule_group() for definition in definitions)

    def analyzer_settings(self, project_root: Path | None = None) -> AnalyzerSettings:
        """Resolve scan roots against ``project_root``."""
        root = project_root or Path.cwd()
        test_dirs = self.scan.test_dirs if self.scan.include_test_code else []
        return AnalyzerSettings(
            src_directories=tuple(root / d for d in self.scan.src_dirs),
            test_directories=tuple(root / d for d in test_dirs),
            encoding=self.scan.encoding,
            parallel_workers=self.scan.parallel_workers,
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return cls(**data)

    def to_yaml(self, path: Path) -> None:
        """Save configuration to YAML file."""
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(mode="json"), f, default_flow_style=False, allow_unicode=True
            )


# Global config instance (lazy-loaded)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from file or create default.

    Raises:
        ConfigurationError: If the file cannot be read or does not hold a valid
            configuration.
    """
    global _config
    try:
        if path and path.exists():
            _config = AppConfig.from_yaml(path)
        elif path:
            raise ConfigurationError(f"Configuration file not found: {path}")
        else:
            _config = AppConfig()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed configuration file {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
    return _config
