from datetime import datetime

from fonds_scrape.config import COLUMNS, DELIMITER, OUTPUT_PREFIX

def output_filename(today=None):
    today = today or datetime.now()
    return f"{OUTPUT_PREFIX}{today.strftime('%Y%m%d')}.csv"

def format_row(values):
    # no quoting: a value holding the delimiter shifts the columns
    return DELIMITER.join(values) + "\n"

def init_output(path):
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(format_row(COLUMNS))

def append_record(path, record):
    with open(path, "a", encoding="utf-8", newline="") as f:
        f.write(format_row([record[col] for col in COLUMNS]))
