import pytest
from selenium.webdriver.common.by import By

from fonds_scrape import log as log_module
from fonds_scrape.config import CONVERTED_VALUE_CLASS


class FakeElement:
    def __init__(self, text):
        self.text = text


class FakeDriver:
    """Stands in for a selenium webdriver with one fixed page."""

    def __init__(self, title="", value_text=None, table_text=None):
        self.title = title
        self.value_text = value_text
        self.table_text = table_text
        self.visited = []
        self.quit_called = False

    def get(self, url):
        self.visited.append(url)

    def find_element(self, by, value):
        if by == By.CLASS_NAME and value == CONVERTED_VALUE_CLASS and self.value_text is not None:
            return FakeElement(self.value_text)
        raise LookupError(f"no element {by}={value}")

    def find_elements(self, by, value):
        if by == By.CSS_SELECTOR and value == "table" and self.table_text is not None:
            return [FakeElement(self.table_text)]
        return []

    def quit(self):
        self.quit_called = True


def make_table_text(positions):
    words = [f"w{i}" for i in range(20)]
    for idx, word in positions.items():
        words[idx] = word
    return " ".join(words[:10]) + "\n" + " ".join(words[10:])


FUND_ONE_TABLE = make_table_text({8: "0.12", 16: "1.23", 10: "0.05", 18: "0.98"})


@pytest.fixture(autouse=True)
def clean_log():
    log_module.reset_log()
    yield
    log_module.reset_log()


@pytest.fixture
def fund_one_driver():
    return FakeDriver(
        title="Fund One | FR0000000001",
        value_text="Valeur = 123.45 EUR",
        table_text=FUND_ONE_TABLE,
    )
