from collections.abc import Iterable, Sequence
from copy import copy
from functools import reduce
from typing import Any, Callable, Union, cast

from graphql import FieldNode, Node, SelectionNode

from graphql_computed_fields.polyfill import flatten
from graphql_computed_fields.utilities.array import group_by, partition
from graphql_computed_fields.utilities.graphql_ import get_response_name, is_field_node

# Pass 1 of a rewrite may leave lists of selections where a single selection used to be.
NestedSelections = Iterable[Union[SelectionNode, Sequence[SelectionNode]]]


group_by_response_name = cast(
    Callable[[Iterable[FieldNode]], dict[str, list[FieldNode]]],
    group_by(get_response_name),
)


def flatten_selections(selections: NestedSelections) -> list[SelectionNode]:
    return flatten(selections)


def merge_nodes(target: Node, source: Node) -> Node:
    """Deep-merge ``source`` into a copy of ``target``.

    Lists are concatenated, nodes of the same kind are merged recursively and
    any other value set on ``source`` replaces the one on ``target``. ``None``
    on ``source`` never overwrites.
    """
    merged = copy(target)

    for key in source.keys:
        source_value: Any = getattr(source, key, None)
        if source_value is None:
            continue

        target_value: Any = getattr(merged, key, None)
        if isinstance(target_value, (list, tuple)) and isinstance(source_value, (list, tuple)):
            # visit() only descends into tuples.
            value = (*target_value, *source_value)
        elif isinstance(target_value, Node) and type(target_value) is type(source_value):
            value = merge_nodes(target_value, source_value)
        else:
            value = source_value

        setattr(merged, key, value)

    return merged


def merge_fields(fields: Sequence[FieldNode]) -> FieldNode:
    return cast(FieldNode, reduce(merge_nodes, fields))


def merge_selections(selections: NestedSelections) -> list[SelectionNode]:
    """Coalesce fields sharing a response name.

    Non-field selections come first in their original order, followed by one
    merged field per response name in the order the names were first seen.
    """
    fields, others = partition(flatten_selections(selections), is_field_node)

    return [
        *others,
        *(
            merge_fields(fields_by_response_name)
            for fields_by_response_name in group_by_response_name(
                cast(list[FieldNode], fields)
            ).values()
        ),
    ]
