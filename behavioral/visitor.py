"""
Visitor pattern over a closed set of shapes.

Shapes are a tagged union of plain dataclasses, and each operation is a
single function that handles every variant. Adding an operation means adding
one function; adding a shape means extending every operation.
"""
import math
from dataclasses import dataclass
from typing import Callable, Iterable, List, TypeVar, Union


@dataclass(frozen=True)
class Circle:
    radius: float = 2


@dataclass(frozen=True)
class Rectangle:
    width: float = 4
    height: float = 6


Shape = Union[Circle, Rectangle]

T = TypeVar('T')


def _unknown_shape(shape: object) -> TypeError:
    return TypeError(f"Unsupported shape: {type(shape).__name__}")


def area(shape: Shape) -> float:
    if isinstance(shape, Circle):
        return math.pi * shape.radius ** 2
    if isinstance(shape, Rectangle):
        return shape.width * shape.height
    raise _unknown_shape(shape)


def perimeter(shape: Shape) -> float:
    if isinstance(shape, Circle):
        return 2 * math.pi * shape.radius
    if isinstance(shape, Rectangle):
        return 2 * (shape.width + shape.height)
    raise _unknown_shape(shape)


def _plain(value: float) -> str:
    """Shortest exact rendering; whole numbers drop the trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def describe_area(shape: Shape) -> str:
    if isinstance(shape, Circle):
        return f"Area of Circle: {area(shape):.2f}"
    if isinstance(shape, Rectangle):
        return f"Area of Rectangle: {_plain(area(shape))}"
    raise _unknown_shape(shape)


def describe_perimeter(shape: Shape) -> str:
    if isinstance(shape, Circle):
        return f"Perimeter of Circle: {perimeter(shape):.2f}"
    if isinstance(shape, Rectangle):
        return f"Perimeter of Rectangle: {_plain(perimeter(shape))}"
    raise _unknown_shape(shape)


def apply_operation(shapes: Iterable[Shape], operation: Callable[[Shape], T]) -> List[T]:
    """Run one operation over every shape, in order."""
    return [operation(shape) for shape in shapes]


def main():
    shapes = [Circle(5), Rectangle(10, 15)]

    print("Calculating areas:")
    for line in apply_operation(shapes, describe_area):
        print(line)
    print()

    print("Calculating perimeters:")
    for line in apply_operation(shapes, describe_perimeter):
        print(line)


if __name__ == "__main__":
    main()
