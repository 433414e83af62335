import json
from pathlib import Path
import pytest
import time
import re
from playwright.sync_api import sync_playwright
from utils.code_utils import to_bool


REPORT_DIR = Path.cwd() / "reports"
REPORT_FILE = REPORT_DIR / "report.html"
CONFIG_FILE = Path(__file__).parent / "config.json"


# ---------------------------------------------------------------------------
# Load configuration
# ---------------------------------------------------------------------------
with open(CONFIG_FILE, encoding="utf-8") as f:
    CONFIG = json.load(f)


# ---------------------------------------------------------------------------
# CLI options
# ---------------------------------------------------------------------------
def pytest_addoption(parser):
    parser.addoption(
        "--highlight",
        action="store",
        choices=["true", "false"],
        help="Highlight elements during tests",
    )

    parser.addoption(
        "--screenshot_on_error",
        action="store",
        choices=["true", "false"],
        help="Capture screenshot on test failure",
    )

    parser.addoption(
        "--step_delay",
        action="store",
        type=int,
        help="Delay (in ms) between steps",
    )

    parser.addoption(
        "--log_steps",
        action="store",
        choices=["true", "false"],
        help="Print every element action",
    )

    parser.addoption(
        "--e2e",
        action="store_true",
        default=False,
        help="Run end-to-end tests that drive a real browser",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("e2e"):
        return

    skip_e2e = pytest.mark.skip(reason="end-to-end test, run with --e2e")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


# ---------------------------------------------------------------------------
# Config fixture
# ---------------------------------------------------------------------------
def get_flag_value(pytestconfig, name: str, cfg: dict) -> bool:
    """Command line flag wins over the config.json value."""
    value = pytestconfig.getoption(name)
    if value is not None:
        return value.lower() == "true"
    return to_bool(cfg.get(name))


def build_config(pytestconfig, base_config: dict = None) -> dict:
    """Merge config.json values with command line overrides."""
    cfg = dict(CONFIG if base_config is None else base_config)

    # Browser and headless (pytest-playwright options)
    browser = pytestconfig.getoption("browser", None)
    headed = pytestconfig.getoption("headed", False)
    if browser:
        cfg["browser"] = browser[0] if isinstance(browser, list) else browser
    if headed:
        cfg["headless"] = False
    else:
        cfg["headless"] = to_bool(cfg.get("headless"), True)

    # Application URL (pytest-base-url option)
    base_url = pytestconfig.getoption("base_url", None)
    if base_url:
        cfg["app_url"] = base_url

    # Highlight mode, step logging and screenshot on error
    for name in ("highlight", "log_steps", "screenshot_on_error"):
        cfg[name] = get_flag_value(pytestconfig, name, cfg)

    # Step delay
    step_delay = pytestconfig.getoption("step_delay")
    if step_delay is not None:
        cfg["step_delay"] = float(step_delay)
    else:
        try:
            cfg["step_delay"] = float(cfg.get("step_delay", 0.0))
        except (TypeError, ValueError):
            cfg["step_delay"] = 0.0

    return cfg


@pytest.fixture(scope="session")
def config(pytestconfig):
    return build_config(pytestconfig)


# ---------------------------------------------------------------------------
# Playwright fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def playwright_instance():
    """Provide a shared Playwright instance."""
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance, config):
    """Launch a browser based on config."""
    browser_name = config.get("browser", "chromium")
    headless = config.get("headless", True)
    browser = getattr(playwright_instance, browser_name).launch(headless=headless)
    yield browser
    browser.close()


@pytest.fixture(scope="function")
def context(browser, config):
    """New browser context per test."""
    context = browser.new_context()
    context.set_default_timeout(config.get("timeout", 30000))
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context, config):
    """New page per test."""
    page = context.new_page()
    page.set_default_timeout(config.get("timeout", 30000))
    yield page
    page.close()


def pytest_configure(config):
    """Make sure reports/ exists and direct pytest-html there."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    config.option.htmlpath = str(REPORT_FILE)
    print(f"[INFO] HTML report → {REPORT_FILE}")


def pytest_sessionstart(session):
    """Delete old report & screenshots before the session begins."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    for f in REPORT_DIR.glob("*"):
        try:
            f.unlink()
        except OSError as e:
            print(f"[WARN] Could not remove {f}: {e}")


def safe_filename(name: str) -> str:
    """
    Convert any string (like test names or parameterized values)
    into a filesystem-safe filename.
    Keeps letters, digits, underscore, dash, and dot only.
    """
    # Replace all invalid filename chars with '_'
    name = re.sub(r'[<>:"/\\|?*\s,=#@!%^&;{}()+\[\]]+', '_', name)
    # Collapse consecutive underscores
    name = re.sub(r'_+', '_', name)
    # Trim leading/trailing underscores or dots
    name = name.strip('._')
    return name[:150]  # limit length to avoid OS path length issues


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a Playwright screenshot and attach it to the HTML report."""
    outcome = yield
    rep = outcome.get_result()

    # Run only when the test itself failed
    if rep.when != "call" or not rep.failed:
        return

    try:
        if not get_flag_value(item.config, "screenshot_on_error", CONFIG):
            return

        # Import safely inside hook (pytest loads this very early)
        from playwright.sync_api import Page

        page = item.funcargs.get("page", None)
        if not page or not isinstance(page, Page):
            return

        from datetime import datetime

        # Build unique name: {test-name}-yyyy-MM-dd-hh-mm-ss-sss.png
        ts = datetime.now().strftime("%Y-%m-%d-%H-%M-%S-%f")[:-3]
        screenshot_name = f"{safe_filename(item.name)}-{ts}.png"
        screenshot_path = REPORT_DIR / screenshot_name

        # Give browser time to render any failure overlay
        time.sleep(0.2)

        page.screenshot(path=str(screenshot_path), full_page=True)
        print(f"[INFO] Screenshot saved → {screenshot_path}")

        # Attach to pytest-html report
        html = item.config.pluginmanager.getplugin("html")
        if html:
            rel_path = screenshot_path.name
            link_html = f'<a href="{rel_path}" target="_blank">Open Screenshot</a>'
            extras = getattr(rep, "extras", [])
            extras.append(html.extras.html(link_html))
            extras.append(html.extras.image(rel_path))
            rep.extras = extras

    except Exception as e:
        print(f"[WARN] Screenshot capture failed: {e}")
