"""
Tests for the console proxy and logging helpers.
"""

import logging

from ts2dart.utils.console import get_console, log_error, log_info, log_success, log_warning, set_log_level


def test_helpers_reach_injected_console(captured_console):
  log_info("info [x]")
  log_success("done")
  log_warning("careful")
  log_error("broken")
  text = captured_console.export_text()

  assert get_console() is captured_console
  for fragment in ("info [x]", "done", "careful", "broken"):
    assert fragment in text


def test_log_level_filters(captured_console):
  set_log_level("WARNING")
  log_info("hidden")
  log_warning("shown")
  text = captured_console.export_text()

  assert "hidden" not in text
  assert "shown" in text
  assert logging.getLogger().level == logging.WARNING
