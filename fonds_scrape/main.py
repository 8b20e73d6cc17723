import argparse
import os

from fonds_scrape.browser import browser_session, fund_url, open_fund_page
from fonds_scrape.config import BROWSER_PROCESS, LOG_DIR
from fonds_scrape.csv_writer import append_record, init_output, output_filename
from fonds_scrape.errors import EXIT_FATAL, EXIT_INTERRUPTED, EXIT_OK, FondsScrapeError
from fonds_scrape.extractor import parse_fund_page
from fonds_scrape.input_loader import load_fund_ids
from fonds_scrape.log import log, save_log_if_error

WARNING_MSG = (
    f"WARNING: this will kill every running {BROWSER_PROCESS} session "
    "(save your work in open windows first)."
)

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="fonds-scrape",
        description="Scrape fund values and variances into a dated | separated file.",
    )
    parser.add_argument("input_file", help="text file with one fund id per line (relative or absolute path)")
    return parser.parse_args(argv)

def confirm(input_fn=input):
    print(WARNING_MSG)
    while True:
        answer = input_fn("Continue? (yes/no): ").strip().lower()
        if answer in ("yes", "no"):
            return answer == "yes"
        print("Please answer yes or no")

def fetch_record(fund_id):
    url = fund_url(fund_id)
    with browser_session() as driver:
        open_fund_page(driver, url)
        return parse_fund_page(driver, fund_id, url)

def run(input_path, output_path, fetch=fetch_record):
    fund_ids = load_fund_ids(input_path)
    init_output(output_path)
    total = len(fund_ids)
    for i, fund_id in enumerate(fund_ids, 1):
        log(f"({i}/{total}) {fund_id}")
        record = fetch(fund_id)
        append_record(output_path, record)
        log(f"Saved {fund_id} to {output_path}")
    log(f"Done: {total}/{total} funds written to {output_path}")
    return total

def main(argv=None, input_fn=input, fetch=fetch_record, log_dir=LOG_DIR):
    args = parse_args(argv)
    output_path = os.path.join(os.getcwd(), output_filename())
    exit_code = EXIT_OK
    try:
        if not confirm(input_fn):
            log("Cancelled by user, nothing was done")
            return EXIT_OK
        run(args.input_file, output_path, fetch)
    except FondsScrapeError as e:
        log(f"Error: {e}", error=True)
        exit_code = e.exit_code
    except (KeyboardInterrupt, EOFError):
        log("Stop")
        exit_code = EXIT_INTERRUPTED
    except Exception as e:
        log(f"Error: {e}", error=True)
        exit_code = EXIT_FATAL
    finally:
        save_log_if_error(log_dir)
    return exit_code

if __name__ == "__main__":
    raise SystemExit(main())
