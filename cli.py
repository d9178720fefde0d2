import argparse
import asyncio
import logging
import os
import sys
import uuid as _uuid
from pathlib import Path

from config.settings import get_settings
from pipelines.summarize_profile import ProfileSummarizer
from services.extractor import extract_profile_info
from services.llm_client import LLMClient
from services.summary_service import build_prompt
from sources.soup_document import SoupDocument
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


def _ensure_run_id() -> None:
    if not os.getenv("RUN_ID"):
        os.environ["RUN_ID"] = _uuid.uuid4().hex


async def _watch(url: str, *, headless: bool, user_data_dir) -> None:
    from sources.browser import open_page
    from sources.playwright_document import PlaywrightDocument

    async with open_page(headless=headless, user_data_dir=user_data_dir) as page:
        document = PlaywrightDocument(page)
        await document.install_observer()
        summarizer = ProfileSummarizer(document, LLMClient())
        closed = asyncio.Event()
        page.on("close", lambda _page: closed.set())
        # Every full load restarts the summarizer; in-page navigations come through mutations
        page.on("load", lambda _page: summarizer.start())
        await page.goto(url)
        try:
            await closed.wait()
        finally:
            await summarizer.stop()


def cmd_watch(args):
    settings = get_settings()
    _ensure_run_id()
    headless = settings.browser_headless if args.headless is None else args.headless
    user_data_dir = args.user_data_dir or settings.browser_user_data_dir
    try:
        asyncio.run(_watch(args.url, headless=headless, user_data_dir=user_data_dir))
    except KeyboardInterrupt:
        print("Stopped")


async def _summarize_html(path: Path, location, timeout: float):
    settings = get_settings()
    document = SoupDocument.from_file(path, location, frame_interval_seconds=settings.frame_interval_seconds)
    summarizer = ProfileSummarizer(document, LLMClient(), warmup_seconds=0, timeout_seconds=timeout)
    ctx = await summarizer.run_once()
    return document, ctx


def cmd_summarize_html(args):
    _ensure_run_id()
    document, ctx = asyncio.run(_summarize_html(Path(args.input), args.location, args.timeout))
    if ctx.record is None:
        print("Could not extract profile information")
        sys.exit(1)
    print(ctx.summary.text if ctx.summary else "")
    if args.output:
        Path(args.output).write_text(document.render(), encoding="utf-8")
        print(f"Wrote {args.output} (summary inserted: {ctx.injected})")


def cmd_prompt(args):
    settings = get_settings()
    document = SoupDocument.from_file(Path(args.input))
    record = asyncio.run(extract_profile_info(document, warmup_seconds=0, timeout_seconds=args.timeout))
    if record is None:
        print("Could not extract profile information")
        sys.exit(1)
    print(record.model_dump_json(indent=2))
    print()
    print(build_prompt(record, settings.summary_language))


def main():
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="LinkedIn profile summarizer")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_watch = sub.add_parser("watch", help="Open a profile in Chromium and keep its summary up to date")
    p_watch.add_argument("--url", required=True, help="LinkedIn profile URL to open")
    p_watch.add_argument("--headless", action=argparse.BooleanOptionalAction, default=None, help="Run Chromium headless (default from BROWSER_HEADLESS)")
    p_watch.add_argument("--user-data-dir", default=None, help="Persistent Chromium profile dir (keeps the LinkedIn login)")
    p_watch.set_defaults(func=cmd_watch)

    p_html = sub.add_parser("summarize-html", help="Summarize a saved profile page and inject the result")
    p_html.add_argument("--input", required=True, help="Path to saved profile HTML")
    p_html.add_argument("--output", help="Write the HTML with the summary inserted here")
    p_html.add_argument("--location", help="Profile URL to report for this page (default: file URI)")
    p_html.add_argument("--timeout", type=float, default=0.0, help="Seconds to wait for name/headline (default: 0)")
    p_html.set_defaults(func=cmd_summarize_html)

    p_prompt = sub.add_parser("prompt", help="Print the extracted fields and prompt without calling the API")
    p_prompt.add_argument("--input", required=True, help="Path to saved profile HTML")
    p_prompt.add_argument("--timeout", type=float, default=0.0, help="Seconds to wait for name/headline (default: 0)")
    p_prompt.set_defaults(func=cmd_prompt)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
