from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def run_parallel(func: Callable[[T], R], items: Iterable[T], max_workers: int | None = None) -> List[R]:
    """Apply `func` to every item on a thread pool; results keep input order."""
    todo = list(items)
    if not todo:
        return []
    n = max_workers or min(32, (os.cpu_count() or 4), len(todo))
    with ThreadPoolExecutor(max_workers=n) as ex:
        return list(ex.map(func, todo))
