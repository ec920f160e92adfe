"""Cron entry point: mark confirmed jobs whose end time has passed as complete.

Example crontab (every 15 minutes):
    */15 * * * * cd /srv/interpreting-agency && python scripts/auto_complete_jobs.py
"""
from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.interpreting_agency.interpreting_agency.container import build_container
from src.interpreting_agency.interpreting_agency.core.log import configure_logging


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        default_minimum_hours=float(getattr(settings, "DEFAULT_MINIMUM_HOURS", 2.0)),
    )
    result = container.job_service.auto_complete()
    print(f"OK: auto-completed {result.updated} jobs" + (f" ({', '.join(result.job_numbers)})" if result.job_numbers else ""))
    return 0


if __name__ == "__main__":
    sys.exit(main())
