"""Runner configuration for QuickProp.

Configuration can be built directly, from environment variables, from a
dictionary or from a YAML/JSON file. Dictionary and file input is validated
through a pydantic model before the frozen ``CheckConfig`` is created.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypedDict

from pydantic import BaseModel, Field, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from quickprop.common.exceptions import ConfigValidationError
from quickprop.constants import (
    DEFAULT_MAX_SHRINK_STEPS,
    DEFAULT_QUICK_TRIALS,
    DEFAULT_TRIALS,
    ENV_VAR_PREFIX,
    FILE_EXT_JSON,
    LIST_MAX_LENGTH,
    SUPPORTED_EXTENSIONS,
    get_list_max_length,
    get_max_shrink_steps,
    get_quick_trials,
    get_seed,
    get_trials,
)


class CheckConfigDict(TypedDict, total=False):
    """TypedDict for runner configuration dictionary"""
    trials: int
    quick_trials: int
    max_shrink_steps: int
    seed: int | None
    list_max_length: int


class CheckConfigModel(BaseModel):
    """Pydantic model validating raw configuration input."""

    trials: int = Field(default=DEFAULT_TRIALS, ge=1, description="Trials for shrinking checks")
    quick_trials: int = Field(
        default=DEFAULT_QUICK_TRIALS, ge=1, description="Trials for checks without shrinking"
    )
    max_shrink_steps: int = Field(
        default=DEFAULT_MAX_SHRINK_STEPS, ge=0, description="Upper bound on accepted shrink steps"
    )
    seed: int | None = Field(default=None, description="Seed for the random source")
    list_max_length: int = Field(
        default=LIST_MAX_LENGTH, ge=1, description="Exclusive upper bound on generated list length"
    )

    model_config = {
        "extra": "forbid",
    }


@dataclass(frozen=True)
class CheckConfig:
    """Configuration for QuickProp property runners"""

    trials: int = DEFAULT_TRIALS
    quick_trials: int = DEFAULT_QUICK_TRIALS
    max_shrink_steps: int = DEFAULT_MAX_SHRINK_STEPS
    seed: int | None = None
    list_max_length: int = LIST_MAX_LENGTH

    def __post_init__(self):
        """Validate configuration after initialization"""
        if self.trials < 1:
            raise ConfigValidationError("trials must be at least 1", config_key="trials")
        if self.quick_trials < 1:
            raise ConfigValidationError("quick_trials must be at least 1", config_key="quick_trials")
        if self.max_shrink_steps < 0:
            raise ConfigValidationError(
                "max_shrink_steps must be non-negative", config_key="max_shrink_steps"
            )
        if self.list_max_length < 1:
            raise ConfigValidationError(
                "list_max_length must be at least 1", config_key="list_max_length"
            )

    @classmethod
    def from_env(cls) -> "CheckConfig":
        """Create configuration from ``QUICKPROP_*`` environment variables"""
        try:
            return cls(
                trials=get_trials(),
                quick_trials=get_quick_trials(),
                max_shrink_steps=get_max_shrink_steps(),
                seed=get_seed(),
                list_max_length=get_list_max_length(),
            )
        except ValueError as e:
            raise ConfigValidationError(
                f"Invalid {ENV_VAR_PREFIX}* environment value: {e}", source="environment"
            ) from e

    @classmethod
    def from_dict(cls, config_dict: CheckConfigDict | dict[str, Any]) -> "CheckConfig":
        """Create configuration from a dictionary, validating every key"""
        try:
            model = CheckConfigModel.model_validate(dict(config_dict))
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first["loc"]) if first["loc"] else None
            raise ConfigValidationError(
                f"Invalid configuration: {first['msg']}" + (f" ({key})" if key else ""),
                config_key=key,
                context={"errors": e.errors()},
            ) from e
        return cls(**model.model_dump())

    @classmethod
    def from_file(cls, path: str | Path) -> "CheckConfig":
        """Create configuration from a YAML or JSON file"""
        path = Path(path)
        extension = path.suffix.lstrip(".").lower()
        if extension not in SUPPORTED_EXTENSIONS:
            raise ConfigValidationError(
                f"Unsupported configuration file type: {path.suffix or '(none)'}",
                source=str(path),
            )

        try:
            with path.open("r", encoding="utf-8") as f:
                if extension == FILE_EXT_JSON:
                    raw = json.load(f)
                else:
                    raw = YAML().load(f)
        except FileNotFoundError as e:
            raise ConfigValidationError(f"Configuration file not found: {path}", source=str(path)) from e
        except (json.JSONDecodeError, YAMLError) as e:
            raise ConfigValidationError(
                f"Failed to parse configuration file {path}: {e}", source=str(path)
            ) from e

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigValidationError(
                f"Configuration file {path} must contain a mapping", source=str(path)
            )
        return cls.from_dict(raw)

    def with_overrides(self, **overrides: Any) -> "CheckConfig":
        """Return a copy with the given non-None values replaced"""
        values = self.to_dict()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return CheckConfig(**values)

    def to_dict(self) -> CheckConfigDict:
        """Convert configuration to typed dictionary"""
        return CheckConfigDict(
            trials=self.trials,
            quick_trials=self.quick_trials,
            max_shrink_steps=self.max_shrink_steps,
            seed=self.seed,
            list_max_length=self.list_max_length,
        )


# Environment variable reference:
# QUICKPROP_TRIALS - Trials per shrinking check (default: 10)
# QUICKPROP_QUICK_TRIALS - Trials per check without shrinking (default: 100)
# QUICKPROP_MAX_SHRINK_STEPS - Shrink step budget (default: 1000)
# QUICKPROP_SEED - Seed for the random source (default: random)
# QUICKPROP_LIST_MAX_LENGTH - Exclusive maximum generated list length (default: 50)
