"""Fund page extraction.

The site has no API, so fields are cut out of the page by position: the
title is split on ``|``, the converted value on ``=``/``EUR`` and the
variances are fixed word positions in the first table. Any change in the
site's markup surfaces as a PageFormatError.
"""
from selenium.webdriver.common.by import By

from fonds_scrape.config import COLUMNS, CONVERTED_VALUE_CLASS, VARIANCE_TOKEN_INDEX
from fonds_scrape.errors import PageFormatError

def parse_title(title):
    name = title.split("|")[0].strip()
    isin = title.split("|")[-1].strip().split()[0]
    return name, isin

def parse_converted_value(text):
    return text.split("=")[1].split("EUR")[0].strip()

def parse_variances(table_text):
    words = table_text.split()
    return {key: words[idx] for key, idx in VARIANCE_TOKEN_INDEX.items()}

def new_record(fund_id):
    record = dict.fromkeys(COLUMNS, "")
    record["web_id"] = fund_id
    return record

def parse_fund_page(driver, fund_id, url, converted_value_class=CONVERTED_VALUE_CLASS):
    record = new_record(fund_id)
    try:
        record["name"], record["isin"] = parse_title(driver.title)
        value_text = driver.find_element(By.CLASS_NAME, converted_value_class).text
        record["value_eur"] = parse_converted_value(value_text)
        table = driver.find_elements(By.CSS_SELECTOR, "table")[0]
        record.update(parse_variances(table.text))
    except Exception as e:
        raise PageFormatError(url) from e
    return record
