from typing import Iterator, List

from sysinfo_core.constants import PROCESS_LIMIT
from sysinfo_core.schemas.system_info import ProcessInfo


class TopProcesses:
    """
    Keeps the processes with the highest CPU usage seen so far.

    Every insert re-sorts by %CPU, highest first, and drops whatever falls
    past the limit. The sort is stable, so processes with equal usage stay in
    the order they were inserted.
    """

    def __init__(self, limit: int = PROCESS_LIMIT):
        if limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")
        self.limit = limit
        self._processes: List[ProcessInfo] = []

    def insert(self, process: ProcessInfo) -> None:
        self._processes.append(process)
        self._processes.sort(key=lambda p: p.cpu, reverse=True)
        del self._processes[self.limit :]

    def to_list(self) -> List[ProcessInfo]:
        return list(self._processes)

    def __iter__(self) -> Iterator[ProcessInfo]:
        return iter(self._processes)

    def __len__(self) -> int:
        return len(self._processes)
