# main.py
import argparse
import logging
import sys
from datetime import datetime

from common.errors import FlowNetworkError
from common.logging_utils import setup_logging
from flow_loader import load_flowsheet
from postproc import write_results_csvs


def run_case(flowsheet_path: str, *, write_csv: bool = False, outdir: str = "results",
             run_id: str | None = None):
    """
    Load a flowsheet, recompute every device in order and print the streams.

    Returns the Flowsheet and the CSV paths (None unless write_csv).
    """
    fs = load_flowsheet(flowsheet_path)
    fs.run()
    fs.print_streams()

    csv_paths = None
    if write_csv:
        run_id = run_id or datetime.now().strftime("%Y%m%d-%H%M%S")
        csv_paths = write_results_csvs(fs, outdir, run_id)
        logging.getLogger(__name__).info(f"results written: {csv_paths}")
    return fs, csv_paths


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Stream / device flow network")
    ap.add_argument("--flowsheet", default="config/flowsheet.yaml")
    ap.add_argument("--log", default="INFO")
    ap.add_argument("--csv", action="store_true", help="write stream and balance CSVs")
    ap.add_argument("--outdir", default="results")
    ap.add_argument("--run-id", default=None)
    args = ap.parse_args(argv)

    setup_logging(args.log)

    try:
        run_case(args.flowsheet, write_csv=args.csv, outdir=args.outdir, run_id=args.run_id)
    except FlowNetworkError as e:
        logging.getLogger(__name__).error(f"flow network error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
