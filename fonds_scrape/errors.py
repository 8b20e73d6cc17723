EXIT_OK = 0
EXIT_FATAL = 1
EXIT_FILE_NOT_FOUND = 2
EXIT_FILE_EMPTY = 3
EXIT_FILE_UNREADABLE = 4
EXIT_INTERRUPTED = 130


class FondsScrapeError(Exception):
    exit_code = EXIT_FATAL


# input file errors

class InputFileError(FondsScrapeError):
    def __init__(self, path, message):
        super().__init__(f"{message}: {path}")
        self.path = path


class InputFileNotFound(InputFileError):
    exit_code = EXIT_FILE_NOT_FOUND

    def __init__(self, path):
        super().__init__(path, "Input file not found")


class InputFileEmpty(InputFileError):
    exit_code = EXIT_FILE_EMPTY

    def __init__(self, path):
        super().__init__(path, "Input file is empty")


class InputFileUnreadable(InputFileError):
    exit_code = EXIT_FILE_UNREADABLE

    def __init__(self, path):
        super().__init__(path, "Input file could not be read")


# page errors, fatal for the whole run

class PageError(FondsScrapeError):
    def __init__(self, url, message):
        super().__init__(f"{message}: {url}")
        self.url = url


class PageUnreachable(PageError):
    def __init__(self, url):
        super().__init__(url, "Could not reach")


class PageNotFound(PageError):
    def __init__(self, url):
        super().__init__(url, "Page not found")


class PageFormatError(PageError):
    def __init__(self, url):
        super().__init__(url, "Page in unexpected format")
