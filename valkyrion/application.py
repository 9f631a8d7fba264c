"""The application base class that owns the window and runs the main loop."""

from __future__ import annotations

import time
from typing import ClassVar

from . import log
from .window import Window, WindowProps

WINDOW_WIDTH = 1600
WINDOW_HEIGHT = 900


class ApplicationError(Exception):
    """Raised when the application is used in an invalid state."""


class Application:
    """A single running application; subclasses override the on_* hooks."""

    _instance: ClassVar[Application | None] = None

    def __init__(self, name: str = "Valkyrion App") -> None:
        if Application._instance is not None:
            raise ApplicationError("Application already exists!")
        Application._instance = self
        self.name = name
        self._running = False
        self._last_frame_time = 0.0
        self._window: Window | None = None
        self._started_at: float | None = None
        self._stopped_at: float | None = None
        self._updates = 0
        self._frames = 0

        log.init()
        log.client_logger().info("Initializing application: %s", name)
        try:
            self._initialize()
        except BaseException:
            if self._window is not None:
                self._window.close()
                self._window = None
            Application._instance = None
            raise

    def _initialize(self) -> None:
        logger = log.client_logger()
        logger.info("Creating window: %s (%dx%d)", self.name, WINDOW_WIDTH, WINDOW_HEIGHT)
        self._window = Window(WindowProps(self.name, WINDOW_WIDTH, WINDOW_HEIGHT))
        self.on_initialize()
        logger.info("Initialized application '%s'", self.name)

    @classmethod
    def get(cls) -> Application:
        """Return the application that currently exists."""
        instance = Application._instance
        if instance is None:
            raise ApplicationError("No application exists.")
        return instance

    @property
    def window(self) -> Window:
        if self._window is None:
            raise ApplicationError("Application has been shut down.")
        return self._window

    @property
    def running(self) -> bool:
        return self._running

    @property
    def delta_time(self) -> float:
        """Seconds between the last two frames."""
        return self._last_frame_time

    @property
    def updates(self) -> int:
        """Number of update steps the base hook has counted."""
        return self._updates

    @property
    def frames(self) -> int:
        """Number of frames the base hook has counted."""
        return self._frames

    @property
    def uptime(self) -> float:
        """Seconds since initialization, or until shutdown once shut down."""
        if self._started_at is None:
            return 0.0
        end = self._stopped_at if self._stopped_at is not None else time.perf_counter()
        return end - self._started_at

    def run(self) -> None:
        """Run frames until the window closes or the application stops."""
        window = self.window
        self._running = True
        log.client_logger().info("Starting application loop...")
        last = time.perf_counter()
        while self._running and not window.should_close():
            now = time.perf_counter()
            self._last_frame_time = now - last
            last = now
            window.on_update()
            self.on_update()
            self.on_render()
            window.swap_buffers()

    def shutdown(self) -> None:
        """Call on_shutdown, close the window and release the singleton."""
        if self._window is None:
            return
        log.client_logger().info("Shutting down application '%s'...", self.name)
        try:
            self.on_shutdown()
        finally:
            self._window.close()
            self._window = None
            if Application._instance is self:
                Application._instance = None
            self._running = False

    def on_initialize(self) -> None:
        """Called once the window exists; records the start time."""
        self._started_at = time.perf_counter()
        self._stopped_at = None

    def on_update(self) -> None:
        """Called once per frame before rendering; counts update steps."""
        self._updates += 1

    def on_render(self) -> None:
        """Called once per frame to draw; counts frames."""
        self._frames += 1

    def on_shutdown(self) -> None:
        """Called before the window is closed; records the stop time."""
        self._stopped_at = time.perf_counter()

    def __enter__(self) -> Application:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()