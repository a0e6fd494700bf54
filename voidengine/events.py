"""Input buttons, engine events and the layer interface that receives them."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from voidengine.config import ClientDimension


class KeyButton(Enum):
    """Keyboard keys the engine recognises."""

    A = 0x01
    B = 0x02
    KEY_UNKNOWN = 0x03


MouseButton = Enum(
    "MouseButton",
    ["LEFT_BTN", "RIGHT_BTN", "MIDDLE_BTN", "X_BUTTON_1", "X_BUTTON_2"],
    start=0,
    module=__name__,
)
MouseButton.__doc__ = "Mouse buttons the engine recognises."

EventCategory = Enum(
    "EventCategory", ["KEYBOARD", "MOUSE", "APPLICATION"], start=0, module=__name__
)

EventType = Enum(
    "EventType",
    [
        "KEY_PRESSED",
        "KEY_RELEASED",
        "APP_CLOSED",
        "APP_RESIZING",
        "APP_ENTER_RESIZE",
        "APP_EXIT_RESIZE",
        "MOUSE_PRESSED",
        "MOUSE_RELEASED",
        "MOUSE_WHEEL_ROTATED",
        "MOUSE_MOVE",
    ],
    start=0,
    module=__name__,
)


class Event:
    """Something that happened to the application window or its input.

    Concrete events name their category and type in the class statement.
    """

    category: EventCategory
    event_type: EventType

    def __init_subclass__(cls, *, category, event_type, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.category = category
        cls.event_type = event_type

    def __new__(cls, *args, **kwargs):
        if cls is Event:
            raise TypeError("Event is abstract; instantiate a concrete event")
        return super().__new__(cls)


_event = dataclass(frozen=True)
_APP = EventCategory.APPLICATION
_KEY = EventCategory.KEYBOARD
_MOUSE = EventCategory.MOUSE


@_event
class ApplicationClosedEvent(Event, category=_APP, event_type=EventType.APP_CLOSED):
    pass


@_event
class ApplicationResizingEvent(Event, category=_APP, event_type=EventType.APP_RESIZING):
    dimension: ClientDimension


@_event
class ApplicationEnterResizeEvent(Event, category=_APP, event_type=EventType.APP_ENTER_RESIZE):
    pass


@_event
class ApplicationExitResizeEvent(Event, category=_APP, event_type=EventType.APP_EXIT_RESIZE):
    dimension: ClientDimension


@_event
class KeyboardPressedEvent(Event, category=_KEY, event_type=EventType.KEY_PRESSED):
    button: KeyButton


@_event
class KeyboardReleasedEvent(Event, category=_KEY, event_type=EventType.KEY_RELEASED):
    button: KeyButton


@_event
class MousePos:
    """Cursor position in client coordinates."""

    x: int
    y: int


@_event
class MousePressedEvent(Event, category=_MOUSE, event_type=EventType.MOUSE_PRESSED):
    button: MouseButton


@_event
class MouseReleasedEvent(Event, category=_MOUSE, event_type=EventType.MOUSE_RELEASED):
    button: MouseButton


@_event
class MouseWheelRotatedEvent(Event, category=_MOUSE, event_type=EventType.MOUSE_WHEEL_ROTATED):
    pass


@_event
class MouseMovedEvent(Event, category=_MOUSE, event_type=EventType.MOUSE_MOVE):
    x: int
    y: int

    @property
    def pos(self):
        return MousePos(self.x, self.y)


class Layer(ABC):
    """A slice of the application that is updated each frame and sees events."""

    @abstractmethod
    def on_init(self):
        """Called once before the layer is first used."""

    @abstractmethod
    def on_detach(self):
        """Called when the layer is removed from the application."""

    @abstractmethod
    def on_attach(self):
        """Called when the layer is added to the application."""

    @abstractmethod
    def on_update(self, dt):
        """Advance the layer by *dt* seconds."""

    @abstractmethod
    def on_event(self, event):
        """Handle *event*."""