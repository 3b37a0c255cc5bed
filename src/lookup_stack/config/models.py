from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from lookup_stack.config.loader import ConfigError

# Config models map the YAML stack description to typed structures.


class PrefixLayer(BaseModel):
    # Wraps the stack built so far in a PrefixResolvingLookup.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["prefix"]
    prefix: str
    strict: bool = True


class PathLayer(BaseModel):
    # Wraps the stack built so far in a PathLookup.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["path"]
    delimiter: str = Field(default="/", min_length=1)


LayerDecl = Annotated[PrefixLayer | PathLayer, Field(discriminator="kind")]


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    sink: Literal["none", "stderr", "jsonl"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path_for_jsonl(self) -> "LoggingConfig":
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required for the jsonl sink")
        return self


class StackConfig(BaseModel):
    # Root config: the data tree (inline or from a file) and the layers stacked on top of it.
    model_config = ConfigDict(extra="forbid")
    version: Literal[1] = 1
    data: dict[str, Any] | None = None
    data_file: str | None = None
    layers: list[LayerDecl] = Field(default_factory=list)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def _exactly_one_data_source(self) -> "StackConfig":
        if (self.data is None) == (self.data_file is None):
            raise ValueError("exactly one of 'data' or 'data_file' must be set")
        return self


def validate_stack_config(raw: dict[str, object]) -> StackConfig:
    # Surface pydantic errors as ConfigError so callers handle one error kind.
    try:
        return StackConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
