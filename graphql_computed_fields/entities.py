from dataclasses import dataclass, field
from typing import Mapping, Optional

from graphql import DocumentNode, FragmentDefinitionNode, Node, parse

from graphql_computed_fields.errors import (
    MalformedDependencyError,
    MissingDependencyError,
    UnknownComputedFieldError,
    UnknownEntityTypeError,
)

TypeName = str
FieldName = str


@dataclass
class EntityField:
    # A document whose first definition is the fragment the field depends on.
    dependencies: Optional[DocumentNode] = None

    @classmethod
    def from_source(cls, source: Optional[str]) -> 'EntityField':
        return cls(dependencies=parse(source) if source is not None else None)


@dataclass
class EntityType:
    fields: dict[FieldName, EntityField] = field(default_factory=dict)


Entities = dict[TypeName, EntityType]


def entities_from_sources(
    sources: Mapping[TypeName, Mapping[FieldName, Optional[str]]]
) -> Entities:
    """Build a registry from fragment sources keyed by type name, then field name.

    >>> entities = entities_from_sources(
    ...     {'User': {'fullName': 'fragment FullName on User { firstName lastName }'}}
    ... )
    """
    return {
        type_name: EntityType(
            fields={
                field_name: EntityField.from_source(source)
                for field_name, source in fields.items()
            }
        )
        for type_name, fields in sources.items()
    }


def get_entity_field(
    entities: Mapping[TypeName, EntityType],
    type_name: TypeName,
    field_name: FieldName,
    node: Optional[Node] = None,
) -> EntityField:
    entity_type = entities.get(type_name)

    if entity_type is None:
        raise UnknownEntityTypeError(type_name, node)

    entity_field = entity_type.fields.get(field_name)

    if entity_field is None:
        raise UnknownComputedFieldError(type_name, field_name, node)

    return entity_field


def get_dependency_fragment(
    entity_field: EntityField,
    type_name: TypeName,
    field_name: FieldName,
    node: Optional[Node] = None,
) -> FragmentDefinitionNode:
    dependencies = entity_field.dependencies

    if dependencies is None:
        raise MissingDependencyError(type_name, field_name, node)

    if not dependencies.definitions:
        raise MalformedDependencyError(type_name, field_name, 'document has no definitions', node)

    fragment = dependencies.definitions[0]

    if not isinstance(fragment, FragmentDefinitionNode):
        raise MalformedDependencyError(
            type_name,
            field_name,
            f'expected a fragment definition, got {type(fragment).__name__}',
            node,
        )

    if fragment.selection_set is None or not fragment.selection_set.selections:
        raise MalformedDependencyError(type_name, field_name, 'fragment selects nothing', node)

    return fragment
