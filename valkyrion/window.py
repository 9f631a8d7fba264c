"""A resizable desktop window backed by pygame."""

from __future__ import annotations

import os
from dataclasses import dataclass

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from . import log  # noqa: E402

CLEAR_COLOR = (51, 51, 51)


@dataclass
class WindowProps:
    """Title and size of a window to create."""

    title: str = "Valkyrion Engine"
    width: int = 1600
    height: int = 900


class Window:
    """A window that polls events and presents frames."""

    def __init__(self, props: WindowProps | None = None) -> None:
        props = props if props is not None else WindowProps()
        self._title = props.title
        self._width = props.width
        self._height = props.height
        self._vsync = False
        self._surface: pygame.Surface | None = None
        self._close_requested = False
        self._display_open = False

        logger = log.client_logger()
        logger.info("Creating window '%s' (%dx%d)", props.title, props.width, props.height)

        try:
            pygame.display.init()
        except pygame.error as exc:
            log.core_logger().error("Display error: %s", exc)
            logger.critical("Could not initialize the display!")
            return
        self._display_open = True

        try:
            surface = pygame.display.set_mode((props.width, props.height), pygame.RESIZABLE)
        except pygame.error as exc:
            log.core_logger().error("Display error: %s", exc)
            logger.critical("Failed to create window!")
            self._quit_display()
            return

        pygame.display.set_caption(props.title)
        self._surface = surface
        self.set_vsync(True)
        logger.info("Window created successfully!")

    @classmethod
    def create(cls, props: WindowProps | None = None) -> Window:
        """Create a window, with default properties when none are given."""
        return cls(props if props is not None else WindowProps())

    @property
    def title(self) -> str:
        return self._title

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def vsync(self) -> bool:
        return self._vsync

    @property
    def native_window(self) -> pygame.Surface | None:
        """The display surface, or None when no window is open."""
        return self._surface

    def set_vsync(self, enabled: bool) -> None:
        """Record whether frames should wait for vertical sync."""
        self._vsync = enabled

    def on_update(self) -> None:
        """Process pending window events."""
        if self._surface is None:
            return
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._close_requested = True

    def should_close(self) -> bool:
        """Return whether the window was closed or never opened."""
        return self._surface is None or self._close_requested

    def swap_buffers(self) -> None:
        """Clear the frame and present it."""
        if self._surface is None:
            return
        self._surface.fill(CLEAR_COLOR)
        pygame.display.flip()

    def close(self) -> None:
        """Destroy the window and release the display."""
        self._surface = None
        self._quit_display()

    def _quit_display(self) -> None:
        if self._display_open:
            pygame.display.quit()
            self._display_open = False

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()