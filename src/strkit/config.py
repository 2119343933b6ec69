"""Handles the parsing and validation of StrKit pipeline configuration files."""

import logging
from pathlib import Path
from typing import Any, Final, Literal

import regex
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .patterns import PatternFlags, compile_pattern, escape_literal

logger = logging.getLogger(__name__)

DEFAULTS_KEY: Final[str] = ".defaults"

OperationName = Literal[
    "upper_case",
    "lower_case",
    "capitalize",
    "trim",
    "triml",
    "trimr",
    "trim_newline",
    "reverse",
    "replace",
    "replace_first",
    "escape",
]

REPLACE_OPERATIONS: Final[frozenset[str]] = frozenset({"replace", "replace_first"})


class StepConfig(BaseModel):
    """A single transform step of a pipeline."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    op: OperationName
    match: str | None = None
    replacement: str | None = None
    is_regex: bool = Field(default=False, alias="regex")
    flags: tuple[str, ...] = ()
    cmap: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_arguments(self) -> "StepConfig":
        """Validate that the arguments required by ``op`` are present and well-formed."""
        if self.op in REPLACE_OPERATIONS:
            self._check_replace_arguments()
        elif self.op == "escape":
            self._check_escape_arguments()
        return self

    def _check_replace_arguments(self) -> None:
        if self.match is None or self.replacement is None:
            msg = f"The '{self.op}' step requires both 'match' and 'replacement'."
            raise ValueError(msg)
        if self.flags and not self.is_regex:
            msg = f"The '{self.op}' step sets 'flags' but 'regex' is not true."
            raise ValueError(msg)
        self.compiled_match()

    def _check_escape_arguments(self) -> None:
        if not self.cmap:
            msg = "The 'escape' step requires a non-empty 'cmap'."
            raise ValueError(msg)
        bad_keys = [key for key in self.cmap if len(key) != 1]
        if bad_keys:
            msg = f"The 'escape' step cmap keys must be single characters, got: {bad_keys}"
            raise ValueError(msg)

    def compiled_match(self) -> regex.Pattern:
        """
        Return the compiled pattern for a replace step; a non-regex match is escaped first.

        Raises:
            ValueError: If the pattern does not compile with the step's flags.

        """
        if self.match is None:
            msg = f"The '{self.op}' step has no 'match'."
            raise ValueError(msg)
        source = self.match if self.is_regex else escape_literal(self.match)
        try:
            return compile_pattern(source, PatternFlags.from_names(self.flags))
        except regex.error as e:
            msg = f"Invalid regex pattern in {self.op} step: '{self.match}' - {e}"
            raise ValueError(msg) from e


class PipelineDefinition(BaseModel):
    """A named, ordered list of steps, optionally extending another pipeline."""

    extends: str | None = None
    steps: list[StepConfig] = Field(default_factory=list)

    @field_validator("steps", mode="before")
    @classmethod
    def _expand_shorthand_steps(cls, value: Any) -> Any:  # noqa: ANN401
        """Allow a bare operation name as shorthand for ``{'op': name}``."""
        if isinstance(value, str):
            value = [value]
        if isinstance(value, list):
            return [{"op": item} if isinstance(item, str) else item for item in value]
        return value


class StrKitConfig(BaseModel):
    """The root configuration for StrKit pipelines."""

    pipelines: dict[str, PipelineDefinition] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_extends_targets(self) -> "StrKitConfig":
        """Ensure every 'extends' names a defined pipeline."""
        for name, pipeline in self.pipelines.items():
            if pipeline.extends is not None and pipeline.extends not in self.pipelines:
                msg = f"Pipeline '{name}' extends unknown pipeline '{pipeline.extends}'."
                raise ValueError(msg)
        return self

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StrKitConfig":
        """Create a StrKitConfig object from a dictionary."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            msg = f"Invalid or missing configuration: {e}"
            raise ValueError(msg) from e

    def _resolve_extends_chain(self, name: str) -> list[PipelineDefinition]:
        """Resolve the inheritance chain of a pipeline, most specific first."""
        chain = []
        visited = set()
        current: str | None = name
        while current is not None and current not in visited and current in self.pipelines:
            visited.add(current)
            pipeline = self.pipelines[current]
            chain.append(pipeline)
            current = pipeline.extends
        return chain

    def resolve_steps(self, name: str) -> list[StepConfig]:
        """
        Return the full list of steps for pipeline ``name``.

        Steps of ``.defaults`` come first, then the steps of each extended
        pipeline from the base of the chain up, then the pipeline's own steps.

        Raises:
            KeyError: If no pipeline called ``name`` exists.

        """
        if name not in self.pipelines:
            available = ", ".join(sorted(n for n in self.pipelines if n != DEFAULTS_KEY)) or "(none)"
            msg = f"Unknown pipeline '{name}'. Available pipelines: {available}"
            raise KeyError(msg)

        chain = self._resolve_extends_chain(name)
        steps: list[StepConfig] = []
        defaults = self.pipelines.get(DEFAULTS_KEY)
        if defaults is not None and all(pipeline is not defaults for pipeline in chain):
            steps.extend(defaults.steps)
        for pipeline in reversed(chain):
            steps.extend(pipeline.steps)
        logger.debug("Resolved pipeline '%s' to %d step(s).", name, len(steps))
        return steps


class StrictSingleQuoteLoader(yaml.SafeLoader):
    """
    A custom YAML loader that enforces the use of single quotes for all strings.

    It raises an error if any double-quoted strings are found, so that regex
    backslashes are never subject to YAML escape processing.
    """


def _construct_scalar(loader: StrictSingleQuoteLoader, node: yaml.ScalarNode) -> Any:  # noqa: ANN401
    """Construct a scalar node, but first check its style."""
    if node.style == '"':
        line = node.start_mark.line + 1
        col = node.start_mark.column + 1
        msg = f"Double-quoted string found at line {line}, column {col}. Please use single quotes (') instead."
        raise yaml.YAMLError(msg)
    return loader.construct_scalar(node)


StrictSingleQuoteLoader.add_constructor("tag:yaml.org,2002:str", _construct_scalar)


def load_config(config_path: str | Path) -> StrKitConfig:
    """
    Load, parse, and validate a YAML pipeline configuration file.

    Args:
        config_path: The path to the configuration file.

    Returns:
        A StrKitConfig object representing the validated configuration.

    Raises:
        FileNotFoundError: If the config file does not exist.
        yaml.YAMLError: If there is a syntax error in the YAML file.
        ValueError: If the configuration is invalid.

    """
    path = Path(config_path)
    if not path.is_file():
        msg = f"Configuration file not found at: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.load(f, Loader=StrictSingleQuoteLoader)  # noqa: S506
    except yaml.YAMLError as e:
        msg = f"Error parsing YAML config file: {e}"
        raise yaml.YAMLError(msg) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = "Invalid or missing configuration: config file must be a YAML mapping (dictionary)."
        raise ValueError(msg)  # noqa: TRY004

    config = StrKitConfig.from_dict(data)
    logger.debug("Loaded %d pipeline(s) from %s", len(config.pipelines), path)
    return config
