"""Application entry point."""

import logging

from calcpad.app.controller import CalculatorController
from calcpad.app.frontend_factory import create_frontend
from calcpad.core.engine import CalculatorEngine
from calcpad.infra.config import load_app_config, load_default_env_files
from calcpad.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Run the standalone calculator window."""
    load_default_env_files()
    setup_logging()
    config = load_app_config()
    logger.info(
        "calcpad_start frontend=%s initial_value=%s",
        config.frontend,
        config.initial_value,
        extra={"calcpad_debug_input": config.debug_input},
    )
    controller = CalculatorController(
        CalculatorEngine(),
        initial_value=config.initial_value,
        result_icon=config.result_icon,
        on_ok=_log_committed_value,
        on_cancel=_log_cancelled,
        debug_input=config.debug_input,
    )
    bundle = create_frontend(controller, config.frontend)
    bundle.window.show_windowed()
    return bundle.run_event_loop()


def _log_committed_value(value: float) -> None:
    logger.info("calcpad_value_committed value=%s", value)
    print(value)


def _log_cancelled() -> None:
    logger.info("calcpad_entry_cancelled")


if __name__ == "__main__":
    raise SystemExit(main())
