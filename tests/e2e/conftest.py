"""Playwright fixtures for E2E tests against the live employee management app."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from playwright.sync_api import Page

from config import get_config
from shared.live_stack import live_app_url
from tests.fixture_data import (
    Credentials,
    FixtureData,
    MissingCredentialsError,
    load_credentials,
)
from tests.pages.employee_page import EmployeePage
from tests.pages.login_page import LoginPage


@pytest.fixture(scope="session")
def live_server() -> Generator[str, None, None]:
    """
    Return the live app URL for E2E tests.

    If E2E_BASE_URL is set, wait for that app to answer.
    Otherwise use the default URL if something is already serving it,
    and skip the suite when nothing is.
    """
    settings = get_config("live")
    yield from live_app_url(
        base_url_env="E2E_BASE_URL",
        base_url_default=settings.BASE_URL,
        suite_name="E2E",
        timeout=settings.HEALTH_TIMEOUT_S,
    )


@pytest.fixture(scope="session")
def credentials() -> Credentials:
    """Credentials from USER_EMAIL / PASSWORD; skips the test when unset."""
    try:
        return load_credentials()
    except MissingCredentialsError as exc:
        pytest.skip(str(exc))


@pytest.fixture
def login_page(page: Page, live_server: str) -> LoginPage:
    """Open the login form and wait for it to render."""
    login = LoginPage(page, live_server)
    login.goto()
    login.wait_for_page_to_load()
    return login


@pytest.fixture
def employee_page(
    page: Page,
    live_server: str,
    login_page: LoginPage,
    credentials: Credentials,
    fixture_data: FixtureData,
) -> EmployeePage:
    """Log in and open the employee list deep link."""
    login_page.login(credentials.email, credentials.password)
    login_page.wait_for_login_to_complete()

    employees = EmployeePage(page, live_server)
    employees.navigate_to(fixture_data.urls["employee_management"])
    employees.wait_for_page_to_load()
    return employees
