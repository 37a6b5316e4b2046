# e2e/mohaax_e2e/flows/runner.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from playwright.sync_api import Error as PlaywrightError

from mohaax_e2e.core.artifacts import Artifacts
from mohaax_e2e.core.config import AppConfig
from mohaax_e2e.core.exceptions import BrowserFailure, E2EError
from mohaax_e2e.core.session import Session
from mohaax_e2e.core.types import LoginRow, RegistrationRow, ScenarioOutcome
from mohaax_e2e.flows.login_flow import run_invalid_login
from mohaax_e2e.flows.signup_flow import run_registration

logger = logging.getLogger(__name__)


def run_step(label: str, session: Session, artifacts_base_dir: Path, step: Callable[[], ScenarioOutcome]) -> ScenarioOutcome:
    """
    Runs one scenario. E2E failures keep their type and get the label attached;
    raw Playwright errors become BrowserFailure. Either way a failure leaves a
    screenshot + HTML under <artifacts>/<label>/ before propagating.
    """
    artifacts = Artifacts(base_dir=artifacts_base_dir, scenario_id=label)
    try:
        outcome = step()
    except E2EError as e:
        if not e.label:
            e.label = label
        artifacts.save_debug(session, "failure")
        logger.error("FAIL %s", e)
        raise
    except PlaywrightError as e:
        err = BrowserFailure(str(e), label=label)
        artifacts.save_debug(session, "failure")
        logger.error("FAIL %s", err)
        raise err from e
    logger.info("PASS [%s] %s", label, outcome.subject)
    return outcome


def run_scenario(row, session: Session, config: AppConfig, artifacts_base_dir: Path) -> ScenarioOutcome:
    if isinstance(row, LoginRow):
        return run_step(row.label, session, artifacts_base_dir, lambda: run_invalid_login(row, session, config))
    if isinstance(row, RegistrationRow):
        return run_step(row.label, session, artifacts_base_dir, lambda: run_registration(row, session, config))
    raise ValueError(f"Unknown scenario row: {type(row).__name__}")
