from collections.abc import Mapping
from typing import Any, Callable, Optional
import pathlib

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator
import yaml

from .errors import ConfigurationError

Sink = Callable[[Optional[str], Optional[bool]], None]


class SuiteConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field("mut", description="Suite name, used as the message prefix")
    abort_on_errors: bool = Field(
        True, validation_alias=AliasChoices("abort_on_errors", "abortOnErrors"),
        description="End a test body at its first failing assertion",
    )
    auto_flush: bool = Field(
        True, validation_alias=AliasChoices("auto_flush", "autoFlush"),
        description="Write assertion messages to the sink as they happen",
    )
    skip_success: bool = Field(
        True, validation_alias=AliasChoices("skip_success", "skipSuccess"),
        description="Drop passing assertion messages",
    )
    output_sink: Optional[Sink] = Field(
        None, validation_alias=AliasChoices("output_sink", "outputSink", "cbOut"),
        description="Callable(message, status); None means the console sink",
    )

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_default(cls, v: Any, info: ValidationInfo) -> Any:
        return v if isinstance(v, str) else cls.model_fields[info.field_name].default

    @field_validator("abort_on_errors", "auto_flush", "skip_success", mode="before")
    @classmethod
    def _bool_or_default(cls, v: Any, info: ValidationInfo) -> Any:
        return v if isinstance(v, bool) else cls.model_fields[info.field_name].default

    @field_validator("output_sink", mode="before")
    @classmethod
    def _callable_or_none(cls, v: Any) -> Any:
        return v if callable(v) else None

    @property
    def prefix(self) -> str:
        return f"{self.name}: " if self.name else ""


def configure(options: Any = None) -> SuiteConfig:
    """Build a SuiteConfig from a mapping of options (either key spelling).

    ``None`` (or no argument) yields a config with every default.
    """
    if options is None:
        return SuiteConfig()
    if isinstance(options, SuiteConfig):
        return options
    if not isinstance(options, Mapping):
        raise ConfigurationError("parameters must be passed as a mapping")
    return SuiteConfig.model_validate(dict(options))


def load_config(path: str) -> SuiteConfig:
    data = yaml.safe_load(pathlib.Path(path).read_text()) or {}
    return configure(data)
