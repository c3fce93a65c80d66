"""Points, circles and wheels, each built around the one before."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Point:
    """A point with integer coordinates."""

    x: int = 0
    y: int = 0


@dataclass
class Circle:
    """A circle; its centre's coordinates are reachable as ``x`` and ``y``."""

    point: Point
    radius: int = 0

    @property
    def x(self) -> int:
        return self.point.x

    @x.setter
    def x(self, value: int) -> None:
        self.point.x = value

    @property
    def y(self) -> int:
        return self.point.y

    @y.setter
    def y(self, value: int) -> None:
        self.point.y = value


@dataclass
class Wheel:
    """A wheel; its circle's centre and radius are reachable directly."""

    circle: Circle
    spokes: int = 0

    @property
    def point(self) -> Point:
        return self.circle.point

    @property
    def x(self) -> int:
        return self.circle.x

    @x.setter
    def x(self, value: int) -> None:
        self.circle.x = value

    @property
    def y(self) -> int:
        return self.circle.y

    @y.setter
    def y(self, value: int) -> None:
        self.circle.y = value

    @property
    def radius(self) -> int:
        return self.circle.radius

    @radius.setter
    def radius(self, value: int) -> None:
        self.circle.radius = value