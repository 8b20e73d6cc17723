import subprocess
import sys
from contextlib import contextmanager
from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.firefox.service import Service

from fonds_scrape.config import BROWSER_PROCESS, HEADLESS, HOST, NOT_FOUND_TITLE
from fonds_scrape.errors import PageNotFound, PageUnreachable
from fonds_scrape.log import log
from fonds_scrape.update_driver import resolve_geckodriver

def fund_url(fund_id, host=HOST):
    return f"https://{host}/Fonds/{fund_id}"

def kill_browser(process_name=BROWSER_PROCESS):
    # exact process name only; no running browser, or no kill tool, is fine
    if sys.platform == "win32":
        cmd = ["taskkill", "/F", "/T", "/IM", f"{process_name}.exe"]
    else:
        cmd = ["pkill", "-x", process_name]
    try:
        subprocess.run(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False)
    except OSError as e:
        log(f"Warning: could not run {cmd[0]}: {e}")

def make_driver(headless=HEADLESS):
    options = webdriver.FirefoxOptions()
    if headless:
        options.add_argument("-headless")
    options.set_preference("dom.webnotifications.enabled", False)
    options.add_argument("--width=1920")
    options.add_argument("--height=1080")
    return webdriver.Firefox(service=Service(resolve_geckodriver()), options=options)

@contextmanager
def browser_session(process_name=BROWSER_PROCESS, headless=HEADLESS):
    """Kill any running browser, start a fresh one and always quit it on exit."""
    kill_browser(process_name)
    driver = make_driver(headless)
    try:
        yield driver
    finally:
        try:
            driver.quit()
        except WebDriverException as e:
            log(f"Warning: browser did not quit cleanly: {e}")

def open_fund_page(driver, url, not_found_title=NOT_FOUND_TITLE):
    try:
        driver.get(url)
    except WebDriverException as e:
        raise PageUnreachable(url) from e
    if driver.title == not_found_title:
        raise PageNotFound(url)
