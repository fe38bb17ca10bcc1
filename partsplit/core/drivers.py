"""
Executors for the step generators in ``engine.py``.

``BlockingIO`` runs each request on the calling thread. ``AsyncIO`` runs the
same handlers through ``asyncio.to_thread`` so that every read and write is a
suspension point. Both keep at most one open source and one open sink and
close them on every exit path.
"""

import asyncio
import contextlib
import os
import stat

from . import engine
from .errors import translate_os_error


class BlockingIO:
    def __init__(self):
        self.source = None
        self.source_path = None
        self.sink = None
        self.sink_path = None

    def _handler(self, op):
        return getattr(self, f"_{op}")

    def _target(self, op, args):
        if args and not isinstance(args[0], (bytes, int)):
            return args[0]
        if op in (engine.READ, engine.CLOSE_SOURCE):
            return self.source_path
        return self.sink_path

    def perform(self, request):
        op, *args = request
        try:
            return self._handler(op)(*args)
        except OSError as exc:
            raise translate_os_error(exc, self._target(op, args)) from exc

    def release(self):
        """Close whatever is still open. Used after an error or a cancellation."""
        for handle in (self.source, self.sink):
            if handle is not None:
                with contextlib.suppress(OSError):
                    handle.close()
        self.source = self.sink = None

    # -- request handlers --

    def _stat(self, path):
        try:
            mode = os.stat(path).st_mode
        except (FileNotFoundError, NotADirectoryError):
            return None
        if stat.S_ISREG(mode):
            return engine.FILE
        if stat.S_ISDIR(mode):
            return engine.DIR
        return engine.OTHER

    def _makedirs(self, path):
        os.makedirs(path, exist_ok=True)

    def _listdir(self, path):
        with os.scandir(path) as entries:
            return [entry.name for entry in entries if entry.is_file()]

    def _size(self, path):
        return os.stat(path).st_size

    def _open_source(self, path):
        self.source_path = path
        self.source = open(path, "rb")

    def _open_sink(self, path):
        self.sink_path = path
        self.sink = open(path, "wb")

    def _read(self, size):
        return self.source.read(size)

    def _write(self, data):
        self.sink.write(data)

    def _close_source(self):
        handle, self.source = self.source, None
        handle.close()

    def _close_sink(self):
        handle, self.sink = self.sink, None
        handle.close()


class AsyncIO(BlockingIO):
    async def perform(self, request):
        op, *args = request
        worker = asyncio.ensure_future(asyncio.to_thread(self._handler(op), *args))
        try:
            return await asyncio.shield(worker)
        except asyncio.CancelledError:
            await self._settle(worker)
            raise
        except OSError as exc:
            raise translate_os_error(exc, self._target(op, args)) from exc

    @staticmethod
    async def _settle(worker):
        """Wait out a worker thread that cancellation cannot interrupt.

        release() must not run while the thread may still open or write a handle.
        """
        while not worker.done():
            try:
                await asyncio.wait([worker])
            except asyncio.CancelledError:
                continue
        if not worker.cancelled():
            worker.exception()


def drive(steps, io=None):
    """Run a step generator to completion on the calling thread."""
    io = io or BlockingIO()
    try:
        request = next(steps)
        while True:
            request = steps.send(io.perform(request))
    except StopIteration as stop:
        return stop.value
    finally:
        io.release()
        steps.close()


async def drive_async(steps, io=None):
    """Run a step generator, suspending on every I/O request."""
    io = io or AsyncIO()
    try:
        request = next(steps)
        while True:
            result = await io.perform(request)
            request = steps.send(result)
    except StopIteration as stop:
        return stop.value
    finally:
        io.release()
        steps.close()
