from contextlib import contextmanager
from typing import Iterator

from playwright.sync_api import Browser, sync_playwright

from batch_shot.config import Config
from batch_shot.console import console

# Scrolls the whole document in fixed steps so lazy content gets requested,
# then jumps back to the top. Resolves once the bottom has been reached.
SCROLL_SCRIPT = """
async ({ distance, interval }) => {
  const height = Math.max(
    document.body.scrollHeight,
    document.body.offsetHeight,
    document.documentElement.clientHeight,
    document.documentElement.scrollHeight,
    document.documentElement.offsetHeight
  );
  console.log('Page height: ' + height + 'px');
  await new Promise((resolve) => {
    let total = 0;
    let steps = 0;
    const timer = setInterval(() => {
      steps++;
      window.scrollBy(0, distance);
      total += distance;
      if (total >= height) {
        window.scrollTo(0, 0);
        console.log('Scrolled ' + steps + ' times');
        clearInterval(timer);
        resolve();
      }
    }, interval);
  });
}
"""


@contextmanager
def launch_browser(config: Config) -> Iterator[Browser]:
    """Launch one browser for the whole run and close it on the way out."""
    with sync_playwright() as p:
        browser = getattr(p, config.browser).launch(
            headless=config.headless,
            args=config.browser_args,
        )
        console.log(f"{config.browser} launched")
        try:
            yield browser
        finally:
            browser.close()
            console.log(f"{config.browser} closed")
