"""Per-client view, focus and input state for up to four local players."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Iterable

__all__ = [
    "MAX_LOCAL_CLIENTS",
    "KeyFocus",
    "Rect",
    "LocalClient",
    "ClientManager",
    "KEY_FORWARD",
    "KEY_BACK",
    "KEY_LEFT",
    "KEY_RIGHT",
    "KEY_UP",
    "KEY_DOWN",
    "KEY_SPRINT",
]

MAX_LOCAL_CLIENTS = 4

KEY_FORWARD = "w"
KEY_BACK = "s"
KEY_LEFT = "a"
KEY_RIGHT = "d"
KEY_UP = "space"
KEY_DOWN = "lctrl"
KEY_SPRINT = "lshift"

_BASE_SPEED = 40.0
_SPRINT_FACTOR = 1.5
_DIAGONAL_FACTOR = 0.5

FovConverter = Callable[[float, float], float]


class KeyFocus(enum.Enum):
    """What receives a client's keyboard input."""

    DEVGUI = 0
    GAME = 1


@dataclass
class Rect:
    """A rectangle in normalised screen coordinates."""

    x: float = 0.0
    y: float = 0.0
    w: float = 1.0
    h: float = 1.0


@dataclass
class LocalClient:
    """The state of one local player."""

    fov: float = 90.0
    fovy: float | None = None
    aspect_inv: float = 1.0
    sensitivity: float = 0.1
    viewport: Rect = field(default_factory=Rect)
    active: bool = False
    key_focus: KeyFocus = KeyFocus.GAME
    has_kbm_focus: bool = False


class ClientManager:
    """Tracks every local client's viewport, activity and input focus.

    ``fov_to_vertical``, when given, turns a horizontal field of view and an
    inverse aspect ratio into a vertical field of view; each client's
    ``fovy`` is then kept up to date whenever its viewport changes.
    """

    def __init__(
        self,
        vid_width: int = 1920,
        vid_height: int = 1080,
        mouse_x: float = 0.0,
        mouse_y: float = 0.0,
        fov_to_vertical: FovConverter | None = None,
    ) -> None:
        if vid_width <= 0 or vid_height <= 0:
            raise ValueError("video dimensions must be positive")
        self.vid_width = vid_width
        self.vid_height = vid_height
        self._fov_to_vertical = fov_to_vertical
        self._last_mouse = (float(mouse_x), float(mouse_y))
        self._first_mouse = True
        self.clients: tuple[LocalClient, ...] = tuple(
            LocalClient() for _ in range(MAX_LOCAL_CLIENTS)
        )
        for client in self.clients:
            self._update_projection(client)
        self.activate(0)
        self.give_kbm_focus(0)

    def _client(self, local_client: int) -> LocalClient:
        if not 0 <= local_client < len(self.clients):
            raise IndexError(f"local client {local_client} out of range")
        return self.clients[local_client]

    def _update_projection(self, client: LocalClient) -> None:
        w = client.viewport.w * self.vid_width
        h = client.viewport.h * self.vid_height
        client.aspect_inv = h / w
        if self._fov_to_vertical is not None:
            client.fovy = self._fov_to_vertical(client.fov, client.aspect_inv)

    def give_kbm_focus(self, local_client: int) -> None:
        """Give keyboard and mouse focus to ``local_client`` alone.

        A number that names no client leaves every client without focus.
        """
        for i, client in enumerate(self.clients):
            client.has_kbm_focus = i == local_client

    def has_kbm_focus(self, local_client: int) -> bool:
        """Return whether ``local_client`` holds keyboard and mouse focus."""
        return self._client(local_client).has_kbm_focus

    def client_with_kbm_focus(self) -> int:
        """Return the client holding focus; ``LookupError`` if none does."""
        for i, client in enumerate(self.clients):
            if client.has_kbm_focus:
                return i
        raise LookupError("no local client has keyboard and mouse focus")

    def key_focus(self, local_client: int) -> KeyFocus:
        """Return what receives ``local_client``'s keys."""
        return self._client(local_client).key_focus

    def set_key_focus(self, local_client: int, focus: KeyFocus) -> None:
        """Direct ``local_client``'s keys to ``focus``."""
        self._client(local_client).key_focus = KeyFocus(focus)

    def activate(self, local_client: int) -> None:
        """Mark ``local_client`` active."""
        self._client(local_client).active = True

    def deactivate(self, local_client: int) -> None:
        """Mark ``local_client`` inactive."""
        self._client(local_client).active = False

    def is_active(self, local_client: int) -> bool:
        """Return whether ``local_client`` is active."""
        return self._client(local_client).active

    def enter_splitscreen(self, active_client: int) -> None:
        """Split the screen between clients 0 (top) and 1 (bottom)."""
        top, bottom = self.clients[0], self.clients[1]
        top.viewport = Rect(0.0, 0.5, 1.0, 0.5)
        self._update_projection(top)
        bottom.viewport = Rect(0.0, 0.0, 1.0, 0.5)
        self._update_projection(bottom)
        if active_client != 0:
            self.activate(0)
        if active_client != 1:
            self.activate(1)

    def leave_splitscreen(self, active_client: int) -> None:
        """Give every client the full screen; only ``active_client`` stays active."""
        for i, client in enumerate(self.clients):
            client.viewport = Rect()
            self._update_projection(client)
            if i != active_client:
                self.deactivate(i)

    def movement(
        self, local_client: int, keys_down: Iterable[str]
    ) -> tuple[float, float, float]:
        """Return the requested velocity for the keys held by ``local_client``.

        Sideways and vertical movement together are each halved.
        """
        self._client(local_client)
        keys = set(keys_down)
        speed = _BASE_SPEED * (_SPRINT_FACTOR if KEY_SPRINT in keys else 1.0)
        x = y = z = 0.0
        if KEY_FORWARD in keys:
            z += speed
        if KEY_BACK in keys:
            z -= speed
        if KEY_LEFT in keys:
            x -= speed
        if KEY_RIGHT in keys:
            x += speed
        if KEY_UP in keys:
            y += speed
        if KEY_DOWN in keys:
            y -= speed
        if x != 0 and y != 0:
            x *= _DIAGONAL_FACTOR
            y *= _DIAGONAL_FACTOR
        return (x, y, z)

    def look(
        self, local_client: int, mouse_x: float, mouse_y: float
    ) -> tuple[float, float] | None:
        """Return the ``(yaw, pitch)`` change for a mouse position.

        Returns ``None`` when the mouse has not moved. The first movement
        only records the position and yields no turn.
        """
        client = self._client(local_client)
        x, y = float(mouse_x), float(mouse_y)
        if (x, y) == self._last_mouse:
            return None
        if self._first_mouse:
            self._last_mouse = (x, y)
            self._first_mouse = False
        last_x, last_y = self._last_mouse
        self._last_mouse = (x, y)
        yaw = -(x - last_x) * client.sensitivity
        pitch = -(y - last_y) * client.sensitivity
        return (yaw, pitch)