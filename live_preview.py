#!/usr/bin/env python3

"""Regenerate an identicon every time its input changes, newest input wins."""

import concurrent.futures
import logging
import threading

import identicon


class LatestOnlyRenderer:
    """Runs identicon generation off the caller's thread.

    Each request draws onto its own fresh surface, so a half-drawn frame is
    never handed to on_ready. Requests that have been superseded by the time
    they start are skipped, and ones superseded while drawing are dropped.
    on_ready runs on the worker thread and is free to call request() itself.
    """

    def __init__(self, surface_factory, on_ready, grid_size=identicon.DEFAULT_GRID_SIZE,
            salt=None):
        self.surface_factory = surface_factory
        self.on_ready = on_ready
        self.grid_size = grid_size
        self.salt = salt
        self.lock = threading.Lock()
        self.latest_request = 0
        self.executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)

    def request(self, raw_string):
        """Queues a generation for raw_string and returns its future."""
        with self.lock:
            self.latest_request += 1
            request_id = self.latest_request
        return self.executor.submit(self._generate, request_id, raw_string)

    def is_stale(self, request_id):
        with self.lock:
            return request_id != self.latest_request

    def _generate(self, request_id, raw_string):
        if self.is_stale(request_id):
            logging.debug("Skipping superseded request #%s", request_id)
            return False
        try:
            surface = self.surface_factory()
            generator = identicon.IdenticonGenerator(surface,
                grid_size=self.grid_size, salt=self.salt)
            generator.generate(raw_string)
        except identicon.IdenticonError:
            logging.exception("Couldn't generate identicon for request #%s", request_id)
            raise
        if self.is_stale(request_id):
            logging.debug("Dropping request #%s, a newer one arrived", request_id)
            return False
        # Outside the lock, so on_ready may call request() again.
        self.on_ready(surface, raw_string)
        return True

    def shutdown(self, wait=True):
        self.executor.shutdown(wait=wait)
