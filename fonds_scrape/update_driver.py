import os
import shutil
import stat
from webdriver_manager.firefox import GeckoDriverManager

from fonds_scrape.config import GECKODRIVER_PATH
from fonds_scrape.log import log

def download_geckodriver(cache_dir=None):
    if cache_dir:
        os.environ['WDM_CACHE_PATH'] = cache_dir
    return GeckoDriverManager().install()

def resolve_geckodriver(driver_path=GECKODRIVER_PATH):
    """Local geckodriver if one was installed next to the project, else webdriver_manager's."""
    if os.path.exists(driver_path):
        return driver_path
    log("No local geckodriver, using webdriver_manager")
    return download_geckodriver()

def update_geckodriver(destination_path=GECKODRIVER_PATH):
    temp_cache_dir = os.path.join(os.path.dirname(destination_path), ".temp_wdm")
    log(f"Checking for geckodriver updates (Temp dir: {temp_cache_dir})")
    try:
        downloaded_path = download_geckodriver(temp_cache_dir)
        log(f"Copying from: {downloaded_path}")
        shutil.copy2(downloaded_path, destination_path)
        st = os.stat(destination_path)
        os.chmod(destination_path, st.st_mode | stat.S_IEXEC)
        log(f"Updated & ready at: {destination_path}")
        return True
    except Exception as e:
        log(f"Failed to update driver: {e}", error=True)
        return False
    finally:
        os.environ.pop('WDM_CACHE_PATH', None)
        if os.path.exists(temp_cache_dir):
            log("Cleaning up temp folder")
            try:
                shutil.rmtree(temp_cache_dir)
            except OSError as e:
                log(f"Warning: Could not delete temp folder: {e}")

def main():
    return 0 if update_geckodriver() else 1

if __name__ == "__main__":
    raise SystemExit(main())
