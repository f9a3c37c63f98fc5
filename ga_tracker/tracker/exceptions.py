from typing import Any


class TrackerServiceError(Exception):
    pass


class UnknownMethodError(TrackerServiceError):
    def __init__(self, method: Any, *args: object) -> None:
        msg = f"Not passed or unknown method: {method!r}"
        super().__init__(msg, *args)


class HitInfoTypeError(TrackerServiceError):
    def __init__(self, info: Any, *args: object) -> None:
        msg = f"Invalid hit info type: {type(info)}"
        super().__init__(msg, *args)
