from collections.abc import Iterable
from typing import Callable, TypeVar, Union

T = TypeVar('T')
U = TypeVar('U')


def flat_map(
    iterable: Iterable[T], func: Callable[[T], Union[list[U], tuple[U, ...], U]]
) -> list[U]:
    result: list[U] = []
    for e in iterable:
        r = func(e)
        # AST nodes are not sequences, so only list and tuple results are spread.
        if isinstance(r, (list, tuple)):
            result.extend(r)
        else:
            result.append(r)

    return result


def flatten(iterable: Iterable[Union[list[T], tuple[T, ...], T]]) -> list[T]:
    return flat_map(iterable, lambda e: e)
