import time

from playwright.sync_api import Error as PlaywrightError
from rich.markup import escape

from batch_shot.browser import SCROLL_SCRIPT, launch_browser
from batch_shot.config import Config
from batch_shot.console import console, err_console
from batch_shot.filenames import build_filename
from batch_shot.models import (
    NameMode,
    RunConfig,
    RunSummary,
    ScreenshotResult,
    format_elapsed,
)


def take_screenshot(
    browser,
    url: str,
    index: int,
    total: int,
    run_config: RunConfig,
    config: Config,
) -> ScreenshotResult:
    """Capture one url into a full page png, reporting failure instead of raising."""
    console.log(f"Processing [{index} of {total}]: {escape(url)}")
    page = None
    try:
        page = browser.new_page(viewport=run_config.viewport)
        if config.verbose:
            page.on("console", lambda msg: console.log(f"[dim]{escape(msg.text)}"))

        page.goto(url, wait_until=config.wait_until, timeout=config.navigation_timeout)
        page.evaluate(
            SCROLL_SCRIPT,
            {"distance": config.scroll_distance, "interval": config.scroll_interval},
        )
        page.wait_for_timeout(config.settle_time)

        label = url
        if run_config.name is NameMode.title:
            label = page.title().strip() or url

        filename = build_filename(
            label,
            run_config.trim,
            index,
            run_config.width,
            run_config.viewport_height,
        )
        console.log(f"Saving as: {escape(filename)}")
        page.screenshot(path=str(run_config.output / filename), full_page=True)
    except (PlaywrightError, OSError) as e:
        err_console.log(f"Failed to capture {escape(url)}: {escape(str(e))}")
        return ScreenshotResult(index=index, url=url, success=False)
    finally:
        if page is not None:
            page.close()

    return ScreenshotResult(index=index, url=url, success=True, filename=filename)


def print_header(run_config: RunConfig, total: int) -> None:
    console.print(f"Found {total} URLs to process")
    console.print(
        f"Viewport size: {run_config.width}px × {run_config.viewport_height}px"
    )
    console.print(f"Title/URL trim length: {run_config.trim} characters")
    if run_config.delay > 0:
        console.print(f"Delay between URLs: {run_config.delay:g}ms")


def print_summary(summary: RunSummary, run_config: RunConfig) -> None:
    console.rule("SUMMARY")
    console.print(f"URLs processed: {summary.processed} of {summary.total}")
    console.print(
        f"Viewport size: {run_config.width}px × {run_config.viewport_height}px"
    )
    console.print(f"Delay between processing URLs: {run_config.delay:g}ms")
    console.print(f"Screenshots saved: {summary.succeeded}")
    console.print(f"Title/URL trim length: {run_config.trim} characters")
    console.print(f"Total execution time: {format_elapsed(summary.elapsed)}")
    if summary.failed == 0:
        console.print("Status: [green]✓ All screenshots completed successfully")
    else:
        plural = "s" if summary.failed > 1 else ""
        console.print(
            f"Status: [yellow]⚠ Completed with {summary.failed} error{plural}"
        )
        console.print(
            f"        {summary.succeeded} successful, {summary.failed} failed"
        )
    console.rule()


def run_batch(
    run_config: RunConfig,
    urls: list[str],
    config: Config,
    launcher=launch_browser,
) -> RunSummary:
    """Screenshot every url in order with a single browser.

    The summary is printed even when an unexpected error aborts the run, the
    error itself is re-raised after the browser has been closed.
    """
    summary = RunSummary(total=len(urls))
    print_header(run_config, summary.total)
    run_config.output.mkdir(parents=True, exist_ok=True)

    start_time = time.monotonic()
    try:
        if urls:
            with launcher(config) as browser:
                for index, url in enumerate(urls, start=1):
                    result = take_screenshot(
                        browser, url, index, summary.total, run_config, config
                    )
                    summary.record(result)

                    if run_config.delay > 0 and index < summary.total:
                        console.log(
                            f"Waiting {run_config.delay:g}ms before processing next URL..."
                        )
                        time.sleep(run_config.delay / 1000)
    finally:
        summary.elapsed = time.monotonic() - start_time
        print_summary(summary, run_config)

    return summary
