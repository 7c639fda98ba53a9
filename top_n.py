"""
Output the N largest integers from a file or from stdin.

Each line is expected to hold one integer. Lines that cannot be converted
are skipped. The selected integers are printed on a single line in
descending order.

A min-heap of at most N values is kept while scanning. Once it is full, a
value below the heap minimum is discarded and any other value replaces the
minimum, so by the end of the scan only the N largest integers remain.

Example usage:
    topn -f ./data -n 15
    seq 0 1000 | topn -n 15
"""
import argparse
import heapq
import logging
import re
import sys

DEFAULT_FILE_NAME = ""
DEFAULT_N = 5

ERROR_FORMAT = "ERROR: %(asctime)s %(message)s"
ERROR_DATE_FORMAT = "%H:%M:%S"

INTEGER_LINE = re.compile(r"[+-]?[0-9]+")


class TopNSelector:
    """
    Keep the N largest integers offered so far.

    Backed by a min-heap so the smallest retained value sits at index 0 and
    can be compared against each new candidate in constant time.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._capacity = capacity
        self._heap = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._heap)

    def _minimum(self) -> int:
        if not self._heap:
            raise IndexError("minimum of empty selector")
        return self._heap[0]

    def offer(self, value: int) -> None:
        """Consider value for the top-N set."""
        # Fill up the heap until capacity values have been added.
        if len(self._heap) < self._capacity:
            heapq.heappush(self._heap, value)
            return

        if not self._heap or value < self._minimum():
            return

        # Equal values replace the minimum too.
        heapq.heapreplace(self._heap, value)

    def drain(self, limit: int) -> list:
        """
        Pop up to limit values, smallest first.
        """
        selection = []
        while len(selection) < limit and self._heap:
            selection.append(heapq.heappop(self._heap))
        return selection


def make_error_logger(stream=None) -> logging.Logger:
    """
    Build the logger fatal errors are reported through.

    Messages go to stream (stderr by default) prefixed with "ERROR: " and the
    time of day. The logger does not propagate, and calling this again
    replaces its handler.
    """
    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setFormatter(logging.Formatter(ERROR_FORMAT, datefmt=ERROR_DATE_FORMAT))

    logger = logging.getLogger("top_n.errors")
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(logging.ERROR)
    logger.propagate = False
    return logger


def scan_integers(lines):
    """
    Yield the integer held by each line, skipping lines that don't parse.

    Only an optional sign followed by ASCII digits is accepted; surrounding
    whitespace makes a line malformed.
    """
    for line in lines:
        token = line.rstrip("\r\n")
        if not INTEGER_LINE.fullmatch(token):
            continue  # Skip lines that can't be converted to ints
        yield int(token)


def stdin_source():
    """Return stdin decoded as UTF-8, replacing bytes that don't decode."""
    sys.stdin.reconfigure(encoding="utf-8", errors="replace")
    return sys.stdin


def select_top_n(lines, n: int) -> TopNSelector:
    selector = TopNSelector(n)
    if n == 0:
        return selector

    for value in scan_integers(lines):
        selector.offer(value)

    return selector


def take_top_n(selector: TopNSelector, n: int) -> list:
    return selector.drain(n)


def format_numbers(numbers) -> str:
    """
    Join numbers highest first. numbers are expected in ascending order.
    """
    return " ".join(str(number) for number in reversed(numbers))


def non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {text!r}")
    return value


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="topn",
        description="Print the N largest integers from a file or stdin in descending order.",
    )
    parser.add_argument(
        "-f", "--file", type=str, default=DEFAULT_FILE_NAME,
        help="file to read (default: stdin)",
    )
    parser.add_argument(
        "-n", type=non_negative_int, default=DEFAULT_N,
        help=f"amount of numbers to select (default: {DEFAULT_N})",
    )
    return parser.parse_args(argv)


def run(argv=None, stdin=None, stdout=None, logger=None) -> int:
    """
    Run the top N program once and return the process exit code.

    Errors opening or reading the input are reported through logger and
    yield 1; nothing is written to stdout in that case.
    """
    args = parse_args(argv)
    stdout = sys.stdout if stdout is None else stdout
    logger = make_error_logger() if logger is None else logger

    # Read from stdin unless a file has been provided.
    opened = args.file != DEFAULT_FILE_NAME
    if not opened:
        source = stdin_source() if stdin is None else stdin
    else:
        try:
            source = open(args.file, "r", encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error("Failed to open file - %s", e)
            return 1

    try:
        selector = select_top_n(source, args.n)
    except OSError as e:
        logger.error("Failed to scan numbers - %s", e)
        return 1
    finally:
        if opened:
            source.close()

    numbers = take_top_n(selector, args.n)
    stdout.write(format_numbers(numbers) + "\n")
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
