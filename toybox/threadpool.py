"""A fixed-size pool of worker threads fed from a shared job queue."""

from __future__ import annotations

import queue
import threading
import traceback
from collections.abc import Callable

_TERMINATE = object()


class _Worker:
    """One thread that runs jobs until told to terminate."""

    def __init__(self, worker_id: int, jobs: queue.SimpleQueue) -> None:
        self.id = worker_id
        self.thread = threading.Thread(
            target=self._run, args=(jobs,), name=f"worker-{worker_id}", daemon=True
        )
        self.thread.start()

    def _run(self, jobs: queue.SimpleQueue) -> None:
        while True:
            job = jobs.get()
            if job is _TERMINATE:
                print(f"Worker {self.id} was told to terminate.")
                break
            print(f"Worker {self.id} got a job; executing.")
            try:
                job()
            except Exception:
                traceback.print_exc()


class ThreadPool:
    """Runs submitted callables on *size* worker threads."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("thread pool size must be positive")
        self._jobs: queue.SimpleQueue = queue.SimpleQueue()
        self._lock = threading.Lock()
        self._closed = False
        self._workers = [_Worker(worker_id, self._jobs) for worker_id in range(size)]

    def execute(self, job: Callable[[], object]) -> None:
        """Queue *job* to be called by the next free worker."""
        with self._lock:
            if self._closed:
                raise RuntimeError("cannot execute jobs after shutdown")
            self._jobs.put(job)

    def shutdown(self) -> None:
        """Let queued jobs finish, then stop and join every worker."""
        with self._lock:
            if self._closed:
                return
            self._closed = True

        print("Sending terminate message to all workers.")
        for _ in self._workers:
            self._jobs.put(_TERMINATE)

        print("Shutting down all workers.")
        for worker in self._workers:
            print(f"Shutting down worker {worker.id}")
            worker.thread.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()