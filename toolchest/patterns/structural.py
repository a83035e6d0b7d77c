"""Structural design patterns: adapter, bridge, composite, decorator,
facade, flyweight and proxy."""

from __future__ import annotations

import enum
import random
import string
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional, TextIO


def _emit(out: Optional[TextIO], text: str) -> None:
    print(text, file=out if out is not None else sys.stdout)


# ------------------------------------------------------------------ adapter


class Square:
    """A square described by its side length."""

    def __init__(self, side_length: float = 0.0) -> None:
        self._side_length = side_length

    @property
    def side_length(self) -> float:
        return self._side_length


@dataclass(frozen=True)
class Circle:
    radius: float


@dataclass(frozen=True)
class Rectangle:
    side1: float
    side2: float

    @property
    def max_side_length(self) -> float:
        return max(self.side1, self.side2)


@dataclass(frozen=True)
class SquareHole:
    side_length: float

    def can_fit(self, square: Square) -> bool:
        return square.side_length <= self.side_length


class CircleToSquareAdapter(Square):
    """Presents a circle as the smallest square that encloses it."""

    def __init__(self, circle: Circle) -> None:
        super().__init__()
        self.circle = circle

    @property
    def side_length(self) -> float:
        return 2 * self.circle.radius


class RectangleToSquareAdapter(Square):
    """Presents a rectangle as a square on its longest side."""

    def __init__(self, rectangle: Rectangle) -> None:
        super().__init__()
        self.rectangle = rectangle

    @property
    def side_length(self) -> float:
        return self.rectangle.max_side_length


# ------------------------------------------------------------------- bridge


class Device(ABC):
    """A powered device with clamped volume and channel settings."""

    MIN_VOLUME: ClassVar[int] = 0
    MAX_VOLUME: ClassVar[int] = 100
    MIN_CHANNEL: ClassVar[int] = 0
    MAX_CHANNEL: ClassVar[int] = 100

    def __init__(self) -> None:
        self.power = False
        self._volume = (self.MIN_VOLUME + self.MAX_VOLUME) // 2
        self._channel = 0

    @property
    def volume(self) -> int:
        return self._volume

    @volume.setter
    def volume(self, value: int) -> None:
        self._volume = max(self.MIN_VOLUME, min(value, self.MAX_VOLUME))

    @property
    def channel(self) -> int:
        return self._channel

    @channel.setter
    def channel(self, value: int) -> None:
        self._channel = max(self.MIN_CHANNEL, min(value, self.MAX_CHANNEL))

    @abstractmethod
    def info(self) -> str:
        """Describe the device's current state."""


class Television(Device):
    def info(self) -> str:
        if self.power:
            return (
                f"You are watching TV Channel #{self.channel}, "
                f"Volume is set to {self.volume}."
            )
        return "The TV is turned off."


class Radio(Device):
    def info(self) -> str:
        if self.power:
            return (
                f"You are listening to Channel #{self.channel}, "
                f"Volume is set to {self.volume}."
            )
        return "The Radio is turned off."


class Remote:
    """Controls any device through its public settings."""

    VOLUME_DELTA: ClassVar[int] = 10
    CHANNEL_DELTA: ClassVar[int] = 1

    def __init__(self, device: Device) -> None:
        self.device = device

    def toggle_power(self) -> None:
        self.device.power = not self.device.power

    def volume_up(self) -> None:
        self.device.volume += self.VOLUME_DELTA

    def volume_down(self) -> None:
        self.device.volume -= self.VOLUME_DELTA

    def channel_up(self) -> None:
        self.device.channel += self.CHANNEL_DELTA

    def channel_down(self) -> None:
        self.device.channel -= self.CHANNEL_DELTA


class RemoteWithMute(Remote):
    def mute(self) -> None:
        self.device.volume = Device.MIN_VOLUME


# ---------------------------------------------------------------- composite


class Container(ABC):
    """Anything with an id and a price."""

    def __init__(self, item_id: int) -> None:
        self.id = item_id

    @abstractmethod
    def calculate_price(self) -> float:
        """Total price of this container."""


class Products(Container):
    """A container of other containers."""

    def __init__(self, item_id: int, items: Iterable[Container] = ()) -> None:
        super().__init__(item_id)
        self.items: list[Container] = list(items)

    def add(self, item: Container) -> None:
        self.items.append(item)

    def remove(self, item_id: int) -> None:
        """Remove every direct child with this id."""
        self.items = [item for item in self.items if item.id != item_id]

    def calculate_price(self) -> float:
        return sum((item.calculate_price() for item in self.items), 0.0)


class Product(Container):
    """A leaf item with a title and a price."""

    def __init__(self, item_id: int, title: str, price: float) -> None:
        super().__init__(item_id)
        self.title = title
        self.price = price

    def calculate_price(self) -> float:
        return self.price


class Book(Product):
    pass


class VideoGame(Product):
    pass


class Stationary(Product):
    pass


# ---------------------------------------------------------------- decorator


class Notifier(ABC):
    """Sends a message and reports the lines it delivered."""

    @property
    @abstractmethod
    def username(self) -> str:
        """The sender's name."""

    @abstractmethod
    def send(self, message: str) -> list[str]:
        """Deliver the message; return the delivery lines in order."""


def _delivery(message: str, channel: str, username: str) -> str:
    return f'Sending message: "{message}" over {channel} (from {username}).'


class ConsoleNotifier(Notifier):
    def __init__(self, username: str, out: Optional[TextIO] = None) -> None:
        self._username = username
        self._out = out

    @property
    def username(self) -> str:
        return self._username

    def send(self, message: str) -> list[str]:
        line = _delivery(message, "Console", self._username)
        _emit(self._out, line)
        return [line]


class NotifierDecorator(Notifier):
    """Wraps a notifier and adds one more delivery channel after it."""

    channel: ClassVar[str] = ""

    def __init__(self, notifier: Notifier, out: Optional[TextIO] = None) -> None:
        self.notifier = notifier
        self._out = out

    @property
    def username(self) -> str:
        return self.notifier.username

    def send(self, message: str) -> list[str]:
        lines = self.notifier.send(message)
        line = _delivery(message, self.channel, self.notifier.username)
        _emit(self._out, line)
        return [*lines, line]


class SMSNotifierDecorator(NotifierDecorator):
    channel = "SMS"


class EmailNotifierDecorator(NotifierDecorator):
    channel = "Email"


# ------------------------------------------------------------------- facade


class ImageReader:
    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out

    def read(self, path: str, image_format: str) -> list[list[int]]:
        _emit(self._out, f"Reading input      : {path}")
        _emit(self._out, f"Input file format  : {image_format}")
        return []


class ImageWriter:
    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out

    def convert(self, image: list[list[int]], image_format: str, path: str) -> str:
        """Write the image; return the path written."""
        _emit(self._out, f"Writing output     : {path}")
        _emit(self._out, f"Output file format : {image_format}")
        _emit(self._out, "Conversion status  : successful")
        return path


class ImageConvertor:
    """Converts an image file to another format in one call."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.reader = ImageReader(out)
        self.writer = ImageWriter(out)

    def convert(self, input_path: str, output_format: str) -> str:
        stem, dot, input_format = input_path.rpartition(".")
        if not dot:
            raise ValueError("Not a valid input file.")
        output_path = f"{stem}.{output_format}"
        image = self.reader.read(input_path, input_format)
        return self.writer.convert(image, output_format, output_path)


# ---------------------------------------------------------------- flyweight


class Color(enum.Enum):
    """Tree colours with their ANSI foreground codes."""

    WHITE = 37
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34


Canvas = list[list[str]]


@dataclass(frozen=True)
class TreeType:
    """Shared, immutable appearance of a tree."""

    rep: str
    color: Color

    def draw(self, x: int, y: int, canvas: Canvas) -> None:
        canvas[x][y] = f"\033[{self.color.value}m{self.rep}\033[0m"


class TreeFactory:
    """Hands out one shared TreeType per (rep, color)."""

    _types: ClassVar[dict[tuple[str, Color], TreeType]] = {}

    @classmethod
    def get_tree_type(cls, rep: str, color: Color) -> TreeType:
        return cls._types.setdefault((rep, color), TreeType(rep, color))


@dataclass
class Tree:
    x: int
    y: int
    tree_type: TreeType

    def draw(self, canvas: Canvas) -> None:
        self.tree_type.draw(self.x, self.y, canvas)


class Forest:
    """A grid of trees that share their types."""

    def __init__(self, rows: int = 10, cols: int = 10) -> None:
        self.rows = rows
        self.cols = cols
        self.trees: list[Tree] = []

    def plant_tree(self, row: int, col: int, rep: str, color: Color) -> Tree:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError("Out of bounds.")
        tree = Tree(row, col, TreeFactory.get_tree_type(rep, color))
        self.trees.append(tree)
        return tree

    def render(self) -> str:
        """Draw every tree on a blank canvas and return it as text."""
        canvas: Canvas = [[" "] * self.cols for _ in range(self.rows)]
        for tree in self.trees:
            tree.draw(canvas)
        return "".join("".join(f"{cell} " for cell in row) + "\n" for row in canvas)


# -------------------------------------------------------------------- proxy


class VideoLibrary(ABC):
    @abstractmethod
    def download_video(self, video_id: int) -> str:
        """Fetch the blob for a video."""


class YouTubeService(VideoLibrary):
    """An expensive remote library; blobs are random lowercase strings."""

    BLOB_LENGTH: ClassVar[int] = 30

    def __init__(
        self, rng: Optional[random.Random] = None, out: Optional[TextIO] = None
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._out = out

    def download_video(self, video_id: int) -> str:
        _emit(self._out, "Fetching blob from YouTube.com..")
        return "".join(
            self._rng.choice(string.ascii_lowercase) for _ in range(self.BLOB_LENGTH)
        )


class CachingVideoProxy(VideoLibrary):
    """Caches downloads of the wrapped library by video id."""

    def __init__(self, service: VideoLibrary, out: Optional[TextIO] = None) -> None:
        self.service = service
        self._cache: dict[int, str] = {}
        self._out = out

    def download_video(self, video_id: int) -> str:
        if video_id in self._cache:
            _emit(self._out, "Fetching blob from Cache..")
            return self._cache[video_id]
        blob = self.service.download_video(video_id)
        self._cache[video_id] = blob
        return blob