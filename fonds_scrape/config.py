import os

# CONFIG
script_dir = os.path.dirname(os.path.abspath(__file__))
root = os.path.dirname(script_dir)

HOST = os.environ.get("FONDS_HOST", "www.fondsweb.com")
NOT_FOUND_TITLE = os.environ.get("FONDS_NOT_FOUND_TITLE", "Seite nicht gefunden | fondsweb")
CONVERTED_VALUE_CLASS = os.environ.get("FONDS_CONVERTED_VALUE_CLASS", "converted-value")
BROWSER_PROCESS = os.environ.get("FONDS_BROWSER_PROCESS", "firefox")
HEADLESS = os.environ.get("FONDS_HEADLESS", "1").lower() not in ("0", "false", "no")

GECKODRIVER_PATH = os.path.join(root, "geckodriver")
LOG_DIR = os.path.join(root, "Logs")

OUTPUT_PREFIX = "fund_list_"
DELIMITER = "|"
COLUMNS = [
    "web_id", "name", "isin", "value_eur",
    "var_1day_fund_%", "var_4week_fund_%", "var_1day_cat_%", "var_4week_cat_%",
]
# position of each variance in the whitespace-split text of the first table
VARIANCE_TOKEN_INDEX = {
    "var_1day_fund_%": 8,
    "var_4week_fund_%": 16,
    "var_1day_cat_%": 10,
    "var_4week_cat_%": 18,
}
