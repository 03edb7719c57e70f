"""
Runtime Configuration Store.

Settings come from the ``[tool.ts2dart]`` table of the nearest
``pyproject.toml`` (searched from the working directory upwards):

.. code-block:: toml

    [tool.ts2dart]
    target = "ES6"
    module = "CommonJS"
    out = "build/out.dart"
    exclude_declarations = true
    log_level = "INFO"

Relative ``out`` paths resolve against the directory holding the TOML file.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ts2dart.enums import ModuleKind, ScriptTarget
from ts2dart.errors import ConfigurationError

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

_LOG_LEVELS = ("DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR")


class CompilerOptions(BaseModel):
  """
  Front-end language options, fixed per Program.
  """

  model_config = ConfigDict(frozen=True)

  target: ScriptTarget = Field(ScriptTarget.ES6, description="ECMAScript level of the input.")
  module: ModuleKind = Field(ModuleKind.COMMONJS, description="Module system of the input.")


class RuntimeConfig(BaseModel):
  """
  Global configuration container for a translation run.
  """

  model_config = ConfigDict(extra="forbid")

  target: ScriptTarget = Field(ScriptTarget.ES6, description="ECMAScript level of the input.")
  module: ModuleKind = Field(ModuleKind.COMMONJS, description="Module system of the input.")
  out: Optional[Path] = Field(None, description="Write the translation here instead of stdout.")
  exclude_declarations: bool = Field(True, description="Skip ambient declaration files (.d.ts).")
  log_level: str = Field("INFO", description="Minimum level of diagnostics shown on the console.")

  @field_validator("log_level")
  @classmethod
  def validate_log_level(cls, v: str) -> str:
    """
    Normalizes and checks the logging level name.

    Args:
        v (str): Level name from TOML.

    Returns:
        str: Upper-cased level name.

    Raises:
        ValueError: If the level is unknown.
    """
    v_clean = v.upper().strip()
    if v_clean not in _LOG_LEVELS:
      raise ValueError(f"Unknown log level: '{v}'. Supported levels: {list(_LOG_LEVELS)}")
    return v_clean

  def compiler_options(self) -> CompilerOptions:
    """
    Derives the front-end options from this configuration.

    Returns:
        CompilerOptions: Options for ``create_program``.
    """
    return CompilerOptions(target=self.target, module=self.module)

  @classmethod
  def load(cls, search_path: Optional[Path] = None) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The resolved configuration (defaults if no table exists).

    Raises:
        ConfigurationError: If the TOML is malformed or a setting is invalid.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)

    settings = dict(toml_config)
    if "out" in settings and toml_dir is not None:
      settings["out"] = (toml_dir / Path(settings["out"])).resolve()

    try:
      return cls(**settings)
    except ValidationError as e:
      raise ConfigurationError(f"Invalid [tool.ts2dart] configuration: {e}") from e


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.

  Raises:
      ConfigurationError: If the first pyproject.toml found cannot be parsed.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Cannot parse {toml_path}: {e}") from e

      tool_section = data.get("tool", {})
      return tool_section.get("ts2dart", {}), parent

  return {}, None
