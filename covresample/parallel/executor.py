# covresample/parallel/executor.py
from __future__ import annotations

import os
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import Any, Callable, Iterable

from covresample.parallel.types import ParallelKind
from covresample import logs


class ParallelExecutor:
    """
    ParallelExecutor

    - fixed-size worker pool (threads or processes)
    - results are returned in item order, never in completion order
    - the first failing item (in item order) re-raises its exception;
      pending items are cancelled
    """

    @staticmethod
    def run(
            *,
            kind: ParallelKind,
            items: Iterable[Any],
            handler: Callable[[Any], Any],
            max_workers: int | None = None,
    ) -> list[Any]:
        items = list(items)
        if not items:
            logs.info("[ParallelExecutor] no items to process")
            return []

        workers = ParallelExecutor._resolve_workers(items, max_workers)

        logs.info(
            f"[ParallelExecutor] start "
            f"kind={ParallelKind(kind).value} total={len(items)} workers={workers}"
        )

        if workers == 1:
            return ParallelExecutor._run_sequential(items, handler)
        return ParallelExecutor._run_parallel(kind, items, handler, workers)

    # ---------------- internal ----------------

    @staticmethod
    def _resolve_workers(items: list, max_workers: int | None) -> int:
        cpu = os.cpu_count() or 1
        if max_workers is None:
            return min(cpu, len(items))
        return max(1, min(max_workers, len(items)))

    @staticmethod
    def _run_sequential(
            items: list,
            handler: Callable[[Any], Any],
    ) -> list:
        return [handler(item) for item in items]

    @staticmethod
    def _run_parallel(
            kind: ParallelKind,
            items: list,
            handler: Callable[[Any], Any],
            workers: int,
    ) -> list:
        pool_cls = (
            ProcessPoolExecutor
            if ParallelKind(kind) is ParallelKind.PROCESS
            else ThreadPoolExecutor
        )

        with pool_cls(max_workers=workers) as pool:
            futures = [pool.submit(handler, item) for item in items]
            try:
                # positional collection
                return [fut.result() for fut in futures]
            except Exception:
                for fut in futures:
                    fut.cancel()
                raise
