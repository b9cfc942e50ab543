import asyncio

from qt.qt_compat import QtCore


class AsyncioPump(QtCore.QObject):
    """Steps an asyncio event loop from a QTimer on the GUI thread.

    Coroutines spawned here share the GUI thread with widget callbacks, so
    session state is only ever touched from one thread.
    """

    def __init__(self, parent=None, interval_ms=15, debug=False):
        super().__init__(parent)
        self.debug = debug
        self.loop = asyncio.new_event_loop()
        self._tasks = set()
        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._step)
        self._timer.start()

    def debug_log(self, message):
        if self.debug:
            print(f"[DEBUG][AsyncioPump] {message}")

    def spawn(self, coro):
        task = self.loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task):
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            self.debug_log(f"Background task failed: {exc!r}")

    def _step(self):
        if self.loop.is_closed():
            return
        self.loop.call_soon(self.loop.stop)
        self.loop.run_forever()

    def shutdown(self):
        self._timer.stop()
        if self.loop.is_closed():
            return
        for task in list(self._tasks):
            task.cancel()
        if self._tasks:
            self.loop.run_until_complete(asyncio.gather(*self._tasks, return_exceptions=True))
        self.loop.run_until_complete(self.loop.shutdown_asyncgens())
        self.loop.close()
