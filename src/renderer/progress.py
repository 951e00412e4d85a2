# renderer/progress.py
import datetime
from typing import List, Union

from tqdm import tqdm

ONE_MINUTE = 60
ONE_HOUR = ONE_MINUTE * 60
ONE_DAY = ONE_HOUR * 24


def format_seconds(seconds: int) -> str:
    """
    Human-readable string for a number of seconds, e.g. 65 -> "1m5s".
    Zero seconds formats as an empty string.
    """
    secs = int(seconds)
    out = ""
    for unit, suffix in ((ONE_DAY, "d"), (ONE_HOUR, "h"), (ONE_MINUTE, "m")):
        if secs >= unit:
            out += f"{secs // unit}{suffix}"
            secs %= unit
    if secs > 0:
        out += f"{secs}s"
    return out


def format_rough_duration(duration: Union[datetime.timedelta, float]) -> str:
    """Formats a duration, ignoring anything below a second."""
    if isinstance(duration, datetime.timedelta):
        duration = duration.total_seconds()
    return format_seconds(int(duration))


class TerminalProgress:
    """
    Progress sink drawing one tqdm bar per render worker.

    Pass an instance as the on_progress callback of a render; use it as a
    context manager so the bars are closed afterwards.
    """

    def __init__(self, workers: int, disable: bool = False):
        self.bars: List[tqdm] = [
            tqdm(total=100, position=i, desc=f"worker {i}", unit="%",
                 leave=True, disable=disable)
            for i in range(workers)
        ]

    def __call__(self, worker_id: int, fraction: float):
        bar = self.bars[worker_id]
        percent = int(min(max(fraction, 0.0), 1.0) * 100)
        if percent > bar.n:
            bar.update(percent - bar.n)

    def close(self):
        for bar in self.bars:
            bar.close()

    def __enter__(self) -> "TerminalProgress":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
