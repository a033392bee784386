"""Reachability helpers for suites that drive a running web app."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Generator

import pytest
import requests

logger = logging.getLogger(__name__)


def is_app_reachable(url: str, path: str = "/login", timeout: int = 2) -> bool:
    """Return True when ``url + path`` answers with a non-5xx status."""
    try:
        response = requests.get(f"{url}{path}", timeout=timeout, allow_redirects=True)
    except requests.RequestException:
        return False
    return response.status_code < 500


def wait_for_app_reachable(
    url: str, path: str = "/login", timeout: int = 60, interval: float = 0.5
) -> None:
    """Poll the app until it serves ``path`` or ``timeout`` seconds pass."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_app_reachable(url, path):
            return
        time.sleep(interval)
    raise RuntimeError(f"App at {url} not reachable after {timeout}s")


def live_app_url(
    *,
    base_url_env: str,
    base_url_default: str,
    suite_name: str,
    timeout: int = 30,
) -> Generator[str, None, None]:
    """
    Yield a reachable app base URL, or skip the suite when there is none.

    Priority:
    1. Use explicit base URL from `base_url_env` (and wait for it).
    2. Fall back to `base_url_default` if it already answers.
    3. Skip: the suite cannot start the application under test itself.
    """
    provided_base_url = os.getenv(base_url_env)
    if provided_base_url:
        base_url = provided_base_url.rstrip("/")
        try:
            wait_for_app_reachable(base_url, timeout=timeout)
        except RuntimeError as exc:
            pytest.skip(f"{exc}; cannot run {suite_name} tests")
        logger.info("Running %s tests against %s", suite_name, base_url)
        yield base_url
        return

    if is_app_reachable(base_url_default):
        logger.info("Running %s tests against %s", suite_name, base_url_default)
        yield base_url_default
        return

    pytest.skip(
        f"No app reachable at {base_url_default}; set {base_url_env} to run {suite_name} tests"
    )
