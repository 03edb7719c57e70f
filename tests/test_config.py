"""
Tests for runtime configuration loading from pyproject.toml.
"""

import pytest

from ts2dart.config import CompilerOptions, RuntimeConfig
from ts2dart.enums import ModuleKind, ScriptTarget
from ts2dart.errors import ConfigurationError


def test_defaults():
  config = RuntimeConfig()

  assert config.target == ScriptTarget.ES6
  assert config.module == ModuleKind.COMMONJS
  assert config.out is None
  assert config.exclude_declarations is True
  assert config.compiler_options() == CompilerOptions()


def test_load_from_parent_directory(tmp_path):
  (tmp_path / "pyproject.toml").write_text(
    '[tool.ts2dart]\nout = "build/out.dart"\nlog_level = "warning"\ntarget = "ES5"\n',
    encoding="utf-8",
  )
  nested = tmp_path / "src" / "pkg"
  nested.mkdir(parents=True)

  config = RuntimeConfig.load(search_path=nested)

  assert config.out == (tmp_path / "build" / "out.dart").resolve()
  assert config.log_level == "WARNING"
  assert config.compiler_options().target == ScriptTarget.ES5


def test_missing_table_uses_defaults(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
  assert RuntimeConfig.load(search_path=tmp_path) == RuntimeConfig()


@pytest.mark.parametrize(
  "body",
  [
    'target = "ES2099"\n',
    'log_level = "LOUD"\n',
    "unknown_key = 1\n",
  ],
)
def test_invalid_settings(tmp_path, body):
  (tmp_path / "pyproject.toml").write_text("[tool.ts2dart]\n" + body, encoding="utf-8")

  with pytest.raises(ConfigurationError):
    RuntimeConfig.load(search_path=tmp_path)


def test_malformed_toml(tmp_path):
  (tmp_path / "pyproject.toml").write_text("[tool.ts2dart\n", encoding="utf-8")

  with pytest.raises(ConfigurationError):
    RuntimeConfig.load(search_path=tmp_path)
