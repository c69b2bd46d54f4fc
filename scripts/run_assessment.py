"""Run an AEO assessment on one website and print the report as JSON.

Usage:
    python scripts/run_assessment.py example.com
    python scripts/run_assessment.py https://example.com --output report.json
    python scripts/run_assessment.py example.com --summary
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from api.logging import setup_logging
from assessment.exceptions import AnalysisFailedError
from assessment.reports.contract import AEOReport
from assessment.tasks.assess import analyze_website


def print_summary(report: AEOReport) -> None:
    """Human-readable overview on stderr."""
    scores = report.scores
    out = sys.stderr
    print(f"\n{'=' * 60}", file=out)
    print(f"AEO Assessment: {report.url}", file=out)
    print(f"{'=' * 60}", file=out)
    print(f"Overall: {scores.overall}/5 ({report.maturity_level})", file=out)
    print(
        f"Content {scores.content} | Technical {scores.technical} | "
        f"Authority {scores.authority} | Measurement {scores.measurement}",
        file=out,
    )
    print("\nTop priorities:", file=out)
    for rec in report.top_priorities:
        print(f"  {rec.priority}. [{rec.category.value}] {rec.title}", file=out)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Assess a website for AI search readiness")
    parser.add_argument("url", help="Website URL (https:// is assumed without a scheme)")
    parser.add_argument(
        "--output",
        type=str,
        help="Write the JSON report to this file instead of stdout",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Also print a short summary to stderr",
    )
    args = parser.parse_args()

    setup_logging()

    try:
        report = await analyze_website(args.url)
    except AnalysisFailedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    payload = json.dumps(report.to_dict(), indent=2)
    if args.output:
        Path(args.output).write_text(payload)
        print(f"Report saved to: {args.output}", file=sys.stderr)
    else:
        print(payload)

    if args.summary:
        print_summary(report)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
