"""
Summary: Fixed-size worker pool that fans a bundle's file indices out and tagged results back in.
Why: Encoding is slow and external, so files of one folder are processed in parallel.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .processing_types import ProcessingEvent, WorkBatch, WorkResult, log_processing

Worker = Callable[[int], Path]


class WorkQueue:
    """Run a worker over indices on ``workers`` threads.

    A producer feeds a bounded job queue and closes it with one stop marker
    per worker. Each worker returns its own list of tagged results; failures
    are logged and kept as results instead of being dropped.
    """

    def __init__(self, workers: int) -> None:
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.workers: int = workers

    def run(self, indices: Sequence[int], worker: Worker) -> WorkBatch:
        jobs: queue.Queue[int | None] = queue.Queue(maxsize=self.workers)

        def produce() -> None:
            for index in indices:
                jobs.put(index)
            for _ in range(self.workers):
                jobs.put(None)

        def consume() -> list[WorkResult]:
            results: list[WorkResult] = []
            while True:
                index = jobs.get()
                if index is None:
                    return results
                try:
                    destination = worker(index)
                except Exception as exc:
                    error_message = str(exc) if str(exc) else type(exc).__name__
                    log_processing(
                        logging.ERROR,
                        ProcessingEvent.FILE_ERROR,
                        "Error processing file #%d: %s",
                        index,
                        error_message,
                        sequence=index,
                        source_path=getattr(exc, "path", None),
                        error_message=error_message,
                    )
                    results.append(WorkResult(index=index, error=exc))
                else:
                    results.append(WorkResult(index=index, destination=destination))

        producer = threading.Thread(target=produce, name="audiocc-producer", daemon=True)
        producer.start()
        with ThreadPoolExecutor(
            max_workers=self.workers, thread_name_prefix="audiocc-worker"
        ) as executor:
            futures = [executor.submit(consume) for _ in range(self.workers)]
            collected = [result for future in futures for result in future.result()]
        producer.join()

        collected.sort(key=lambda result: result.index)
        return WorkBatch(results=collected)


__all__ = ["WorkQueue", "Worker"]
