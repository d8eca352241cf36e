from collections.abc import Mapping
from typing import Optional

from graphql_computed_fields.directives import (
    COMPUTED_DIRECTIVE_NAME,
    get_directive_type,
    node_has_computed_directives,
)
from graphql_computed_fields.entities import (
    Entities,
    EntityField,
    EntityType,
    TypeName,
    entities_from_sources,
)
from graphql_computed_fields.errors import (
    ComputedDirectiveError,
    DependencyCycleError,
    InvalidComputedDirectiveError,
    MalformedDependencyError,
    MissingDependencyError,
    UnknownComputedFieldError,
    UnknownEntityTypeError,
)
from graphql_computed_fields.rewrite import (
    RewriteOptions,
    TQuery,
    add_fragments_from_directives,
    replace_directives_by_fragments,
)

__all__ = [
    'COMPUTED_DIRECTIVE_NAME',
    'ComputedDirectiveError',
    'ComputedFieldsRewriter',
    'DependencyCycleError',
    'Entities',
    'EntityField',
    'EntityType',
    'InvalidComputedDirectiveError',
    'MalformedDependencyError',
    'MissingDependencyError',
    'RewriteOptions',
    'UnknownComputedFieldError',
    'UnknownEntityTypeError',
    'add_fragments_from_directives',
    'entities_from_sources',
    'get_directive_type',
    'node_has_computed_directives',
    'replace_directives_by_fragments',
]


class ComputedFieldsRewriter:
    # Binds a registry and options so callers holding both don't have to pass
    # them on every rewrite. Each call still resolves dependencies afresh.

    entities: Mapping[TypeName, EntityType]
    options: RewriteOptions

    def __init__(
        self,
        entities: Mapping[TypeName, EntityType],
        options: Optional[RewriteOptions] = None,
    ):
        self.entities = entities
        self.options = options if options is not None else RewriteOptions()

    def replace(self, query: Optional[TQuery]) -> Optional[TQuery]:
        return replace_directives_by_fragments(query, self.entities, self.options)

    def augment(self, query: Optional[TQuery]) -> Optional[TQuery]:
        return add_fragments_from_directives(query, self.entities, self.options)
