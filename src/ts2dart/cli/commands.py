"""
CLI Command Handlers.
"""

import sys
from typing import List, Optional

from ts2dart.config import RuntimeConfig
from ts2dart.core.engine import translate_files
from ts2dart.errors import ConfigurationError, TranslationError
from ts2dart.utils.console import log_error, log_success, set_log_level


def handle_translate(files: List[str], config: Optional[RuntimeConfig] = None) -> int:
  """
  Translates ``files`` and writes the Dart output.

  Nothing is written when any file fails.

  Args:
      files: Input paths, in output order.
      config: Settings to use; loaded from pyproject.toml when omitted.

  Returns:
      int: 0 on success, 1 on any error.
  """
  try:
    if config is None:
      config = RuntimeConfig.load()
    set_log_level(config.log_level)
    result = translate_files(files, config)
  except (TranslationError, ConfigurationError) as e:
    log_error(str(e))
    return 1
  except (OSError, UnicodeDecodeError) as e:
    log_error(f"Cannot read input: {e}")
    return 1

  if config.out is not None:
    config.out.parent.mkdir(parents=True, exist_ok=True)
    config.out.write_text(result, encoding="utf-8")
    log_success(f"Wrote {config.out}")
  else:
    sys.stdout.write(result)
    sys.stdout.flush()
    log_success(f"Translated {len(files)} input file(s)")
  return 0
