import argparse
import logging

from servicecenter.config import load_settings
from servicecenter.console import run_menu
from servicecenter.registry import ServiceCenter


def _setup_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Vehicle service center appointment tracker")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (DEBUG, INFO, ...)")
    args = parser.parse_args()

    settings = load_settings()
    level = getattr(logging, args.log_level.upper(), None) if args.log_level else None
    _setup_logging(level if isinstance(level, int) else settings.log_level_value)

    logging.getLogger(__name__).info("Service center started (strict_dates=%s)", settings.strict_dates)
    return run_menu(ServiceCenter(), settings)


if __name__ == "__main__":
    raise SystemExit(main())
