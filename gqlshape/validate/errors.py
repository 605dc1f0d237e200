from typing import List, Tuple

from ..error import ErrorKind


class Errors:
    def __init__(self) -> None:
        self.list: List[Tuple[ErrorKind, str]] = []

    def report(self, kind: ErrorKind, msg: str) -> None:
        self.list.append((kind, msg))
