from contextlib import contextmanager
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
import pytest

from batch_shot.config import Config, get_config


class FakePage:
    def __init__(self, browser, viewport):
        self.browser = browser
        self.viewport = viewport
        self.url = None
        self.handlers = {}
        self.closed = False

    def on(self, event, handler):
        self.handlers[event] = handler

    def goto(self, url, wait_until=None, timeout=None):
        self.browser.visited.append(url)
        if url in self.browser.unreachable:
            raise PlaywrightError(f"net::ERR_NAME_NOT_RESOLVED at {url}")
        self.url = url

    def evaluate(self, script, arg=None):
        self.browser.scrolled.append(arg)

    def wait_for_timeout(self, timeout):
        pass

    def title(self):
        return self.browser.titles.get(self.url, "")

    def screenshot(self, path, full_page=False):
        if self.url in self.browser.crashing:
            raise RuntimeError("browser has crashed")
        Path(path).write_bytes(b"\x89PNG")
        self.browser.saved.append(Path(path).name)

    def close(self):
        self.closed = True


class FakeBrowser:
    def __init__(self, titles=None, unreachable=(), crashing=()):
        self.titles = titles or {}
        self.unreachable = set(unreachable)
        self.crashing = set(crashing)
        self.refused_pages = set()
        self.pages = []
        self.visited = []
        self.scrolled = []
        self.saved = []
        self.close_count = 0

    def new_page(self, viewport=None):
        if len(self.pages) + 1 in self.refused_pages:
            self.pages.append(None)
            raise PlaywrightError("Target page, context or browser has been closed")
        page = FakePage(self, viewport)
        self.pages.append(page)
        return page

    def close(self):
        self.close_count += 1


class FakeLauncher:
    """Stands in for ``launch_browser`` and hands out a ``FakeBrowser``."""

    def __init__(self, browser):
        self.browser = browser
        self.launches = 0

    @contextmanager
    def __call__(self, config):
        self.launches += 1
        try:
            yield self.browser
        finally:
            self.browser.close()


@pytest.fixture(autouse=True)
def clear_config_cache():
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def config():
    return Config(settle_time=0, scroll_interval=0)


@pytest.fixture
def browser():
    return FakeBrowser(
        titles={
            "https://example.com": "Example Domain",
            "https://www.python.org/": "Welcome to Python.org",
        }
    )


@pytest.fixture
def launcher(browser):
    return FakeLauncher(browser)


@pytest.fixture
def url_file(tmp_path):
    def write(*lines):
        path = tmp_path / "urls.txt"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return write
