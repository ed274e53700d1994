"""Background asyncio loop shared by the UI and the product controller."""

import asyncio
import concurrent.futures
import logging
import threading
from typing import Any, Callable, Coroutine, Optional

logger = logging.getLogger("ProductFeed.BackgroundLoop")


class BackgroundLoop:
    """Runs one asyncio event loop in a daemon thread.

    GTK owns the main thread, so network work and controller state live on
    this loop. Other threads hand work over with ``call_soon`` or ``run``.
    """

    def __init__(self, name: str = "productfeed-loop"):
        self.name = name
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self._ready = threading.Event()

    @property
    def loop(self) -> Optional[asyncio.AbstractEventLoop]:
        return self._loop

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running():
            return
        self._ready.clear()
        self._thread = threading.Thread(target=self._run_loop, name=self.name, daemon=True)
        self._thread.start()
        self._ready.wait()

    def _run_loop(self) -> None:
        loop = asyncio.new_event_loop()
        self._loop = loop
        asyncio.set_event_loop(loop)
        loop.call_soon(self._ready.set)
        try:
            loop.run_forever()
        finally:
            pending = asyncio.all_tasks(loop)
            for task in pending:
                task.cancel()
            if pending:
                loop.run_until_complete(
                    asyncio.gather(*pending, return_exceptions=True)
                )
            loop.close()
            logger.debug("Background loop closed")

    def call_soon(self, callback: Callable[..., Any], *args: Any) -> None:
        if self._loop is None:
            raise RuntimeError("Background loop is not running")
        self._loop.call_soon_threadsafe(callback, *args)

    def run(self, coro: Coroutine) -> concurrent.futures.Future:
        if self._loop is None:
            raise RuntimeError("Background loop is not running")
        return asyncio.run_coroutine_threadsafe(coro, self._loop)

    def stop(self, timeout: float = 1.0) -> None:
        if self._loop is not None and self.is_running():
            self._loop.call_soon_threadsafe(self._loop.stop)
            self._thread.join(timeout=timeout)
        self._thread = None
        self._loop = None
