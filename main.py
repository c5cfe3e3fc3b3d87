import argparse
import asyncio
import json
import logging
import sys
from glints_scraper.core.errors import ScraperError
from glints_scraper.core.runner import build_query, runner, summarize_results


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Scrape job listings from Glints.")
    parser.add_argument("query", nargs="*", help="free-text search phrase")
    parser.add_argument("--skills", nargs="*", default=[], help="profile skills")
    parser.add_argument("--industry", default="", help="desired industry")
    parser.add_argument("--limit", type=int, default=None, help="max records (1-9)")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    """
    Main entry point.
    """
    args = parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    query = " ".join(args.query) or build_query(args.skills, args.industry)
    if not query:
        print("Provide a search query or --skills/--industry.", file=sys.stderr)
        return 2

    try:
        jobs = await runner.run(query=query, limit=args.limit)
    except ScraperError as e:
        logging.getLogger(__name__).error(f"Scrape failed: {e}")
        print("No jobs found, try again later.", file=sys.stderr)
        return 1

    print(summarize_results(jobs), file=sys.stderr)
    print(json.dumps([job.to_dict() for job in jobs], indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        pass
