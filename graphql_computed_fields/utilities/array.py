from collections.abc import Iterable
from typing import Callable, TypeVar

T = TypeVar('T')
U = TypeVar('U')


def group_by(key_function: Callable[[T], U]) -> Callable[[Iterable[T]], dict[U, list[T]]]:
    # Groups keep the order in which their keys were first seen.
    def impl(iterable: Iterable[T]) -> dict[U, list[T]]:
        result: dict[U, list[T]] = {}

        for element in iterable:
            result.setdefault(key_function(element), []).append(element)

        return result

    return impl


def partition(
    iterable: Iterable[T], predicate: Callable[[T], bool]
) -> tuple[list[T], list[T]]:
    matching: list[T] = []
    rest: list[T] = []

    for element in iterable:
        (matching if predicate(element) else rest).append(element)

    return matching, rest
