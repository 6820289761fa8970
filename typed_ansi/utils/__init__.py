import sys


def warn(msg: str) -> None:
    sys.stderr.write(msg + "\n")
