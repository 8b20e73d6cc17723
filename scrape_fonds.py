import sys

from fonds_scrape.main import main

if __name__ == "__main__":
    sys.exit(main())
