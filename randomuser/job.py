#!/usr/bin/env python3
"""
Export job:
- fetch users from the API
- build the formatted pandas view
- upsert into random_users.csv
- print summary for logs
"""

import argparse
import logging
from typing import List, Optional

from .client import RandomUserClient
from .config import Settings, load_settings
from .errors import ApiError
from .io_utils import upsert_users_csv
from .log import configure_logging
from .params import GENDERS, FetchOptions, OptionsLike
from .transformations import users_to_frame

logger = logging.getLogger(__name__)


def run_export_job(
    options: OptionsLike = None,
    settings: Optional[Settings] = None,
    client: Optional[RandomUserClient] = None,
) -> dict: # this will be a dict of metrics about the export job.
    """
    Run one export cycle and return metrics as a dict
    (so FastAPI or other callers can inspect the result).

    Steps:
      1) Fetch users from the RandomUser API.
      2) Build the formatted DataFrame.
      3) Append to CSV, drop duplicates.
      4) Collect and print metrics.
    """
    settings = settings or load_settings()
    if options is None:
        options = FetchOptions(results=10) # same page size the cron job always asked for

    # --------------------------------------------------------------------------------------------------
    # 1) Fetch from API. A client passed in by the caller stays open; one we create here is closed here.
    # --------------------------------------------------------------------------------------------------
    owns_client = client is None
    client = client or RandomUserClient(settings)
    try:
        response, resp = client.get_users_with_response(options)
        # resp is the response of THIS request, so the status below is ours even if the client is shared.
    finally:
        if owns_client:
            client.close()

    # --------------------------------------------------------------------------------------------------
    # 2) Transform - one row per user with full_name, address and dob_formatted
    # --------------------------------------------------------------------------------------------------
    _, df_view = users_to_frame(response.results, settings.date_format)

    # --------------------------------------------------------------------------------------------------
    # 3) Write/append to CSV - append, then drop users we already had (same login.uuid)
    # --------------------------------------------------------------------------------------------------
    df_final, csv_path = upsert_users_csv(df_view, settings.data_dir)

    # --------------------------------------------------------------------------------------------------
    # 4) Collect metrics about the run
    # --------------------------------------------------------------------------------------------------
    metrics = {
        "http_status": resp.status_code,
        "rows_fetched": len(df_view),
        "rows_after_dedup": len(df_final),
        "csv_path": str(csv_path),
        "seed": response.info.seed, # reuse it with --seed to fetch the same users again
    }

    # key=value lines on stdout, picked up by the cron / .sh wrapper logs
    print(f"wrote {metrics['rows_after_dedup']} rows to {metrics['csv_path']}")
    print(f"api_url={settings.base_url} seed={metrics['seed']}")
    print(f"http_status={metrics['http_status']}")
    print(
        f"rows_fetched={metrics['rows_fetched']} "
        f"rows_after_dedup={metrics['rows_after_dedup']} "
        f"output={metrics['csv_path']}"
    )
    return metrics


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch random users and append them to random_users.csv")
    parser.add_argument("--results", type=int, default=10, help="number of users to fetch")
    parser.add_argument("--gender", choices=GENDERS)
    parser.add_argument("--nat", help="nationality codes, comma separated (us,gb)")
    parser.add_argument("--seed")
    parser.add_argument("--page", type=int)
    return parser


def main(argv: Optional[List[str]] = None) -> int: # called when the job runs from the command line / cron
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(settings.log_level)

    # Bad flag values (e.g. --results 0) are a usage error: exit code 2, like argparse itself.
    try:
        options = FetchOptions(
            results=args.results,
            gender=args.gender,
            nat=args.nat.split(",") if args.nat else None,
            seed=args.seed,
            page=args.page,
        )
    except ValueError as exc:
        logger.error("invalid options: %s", exc)
        return 2

    # An API failure is logged and turned into exit code 1 so the wrapper script notices.
    try:
        run_export_job(options, settings)
    except ApiError as exc:
        logger.error("export failed: %s", exc)
        return 1
    return 0 # 0 = success


# Only run the job when this file is executed directly (not when it's imported)
if __name__ == "__main__":
    # Exit code is important for cron / the .sh wrapper.
    raise SystemExit(main())
