import logging
from collections.abc import Mapping
from typing import Callable

from graphql import FieldNode, FragmentDefinitionNode

from graphql_computed_fields.directives import get_computed_directive, get_directive_type
from graphql_computed_fields.entities import (
    EntityType,
    FieldName,
    TypeName,
    get_dependency_fragment,
    get_entity_field,
)
from graphql_computed_fields.errors import DependencyCycleError

logger = logging.getLogger(__name__)


class FragmentResolver:
    """Turns a @computed field into the fragment it depends on.

    The fragment is passed through ``rewrite`` before being returned, so any
    @computed field nested in a dependency is dealt with in the same way as
    the field that required it.
    """

    entities: Mapping[TypeName, EntityType]
    rewrite: Callable[[FragmentDefinitionNode], FragmentDefinitionNode]
    detect_cycles: bool

    def __init__(
        self,
        entities: Mapping[TypeName, EntityType],
        rewrite: Callable[[FragmentDefinitionNode], FragmentDefinitionNode],
        detect_cycles: bool = True,
    ):
        self.entities = entities
        self.rewrite = rewrite
        self.detect_cycles = detect_cycles
        # (type, field) pairs whose dependencies are being rewritten, outermost first
        self.resolving: list[tuple[TypeName, FieldName]] = []

    def resolve(self, field_node: FieldNode) -> FragmentDefinitionNode:
        type_name = get_directive_type(get_computed_directive(field_node))
        # Aliases only rename the response key, the registry is keyed by field name.
        field_name = field_node.name.value
        key = (type_name, field_name)

        if self.detect_cycles and key in self.resolving:
            raise DependencyCycleError([*self.resolving, key], field_node)

        entity_field = get_entity_field(self.entities, type_name, field_name, field_node)
        fragment = get_dependency_fragment(entity_field, type_name, field_name, field_node)

        logger.debug(
            'Resolving @computed field %s.%s with fragment %s',
            type_name,
            field_name,
            fragment.name.value,
        )

        self.resolving.append(key)
        try:
            return self.rewrite(fragment)
        finally:
            self.resolving.pop()
