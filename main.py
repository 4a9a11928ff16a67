"""
Menu Ratings Report

CLI entry point: builds the HTML report and writes it to stdout.
"""

import argparse
import logging
import sys
from typing import List, Optional

from menureport.errors import ReportError
from menureport.orchestrator import ReportOrchestrator
from menureport.stages.rendering import ReportRenderer, summary_frame
import config.settings as settings


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """Configure logging for the entire application. stdout is reserved for the report."""
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=handlers,
        force=True
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build an HTML report of menu ratings and visit statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default layout: menu.csv and ratings/*.csv in the current directory
  python main.py > index.html

  # Custom locations, plus a per-person summary table
  python main.py --menu data/menu.csv --ratings-dir data/ratings \\
                 --summary-csv output/summary.csv > index.html
        """
    )

    parser.add_argument(
        "--menu",
        default=str(settings.MENU_PATH),
        help=f"Menu CSV (default: {settings.MENU_PATH})"
    )

    parser.add_argument(
        "--ratings-dir",
        default=str(settings.RATINGS_DIR),
        help=f"Directory with one ratings CSV per person (default: {settings.RATINGS_DIR})"
    )

    parser.add_argument(
        "--summary-csv",
        help="Also write per-person statistics to this CSV file"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    parser.add_argument(
        "--log-file",
        default=settings.LOG_FILE,
        help="Also write logs to this file"
    )

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level, args.log_file)
    logger = logging.getLogger(__name__)

    try:
        orchestrator = ReportOrchestrator(
            menu_path=args.menu,
            ratings_dir=args.ratings_dir,
            flush_final_week=settings.FLUSH_FINAL_WEEK,
            strict_scale=settings.STRICT_SCALE,
            iso_year_weeks=settings.ISO_YEAR_AWARE_WEEKS,
            ratings_suffix=settings.RATINGS_SUFFIX
        )
        report = orchestrator.run()

        renderer = ReportRenderer(
            title=settings.REPORT_TITLE,
            intro=settings.REPORT_INTRO,
            image_dir=settings.IMAGE_DIR
        )
        html = renderer.render(report.menu, report.stats)

        if args.summary_csv:
            summary_frame(report.stats).to_csv(args.summary_csv, index=False)
            logger.info(f"Summary table saved to {args.summary_csv}")

    except ReportError as e:
        logger.error(str(e))
        sys.exit(1)

    except OSError as e:
        logger.error(f"Failed to write output: {e}")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Report generation failed: {e}", exc_info=True)
        sys.exit(1)

    # Nothing reaches stdout unless every step above succeeded
    sys.stdout.write(html)
    sys.stdout.flush()


if __name__ == "__main__":
    main()
