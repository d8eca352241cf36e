import logging
from collections.abc import Mapping
from copy import copy, deepcopy
from dataclasses import dataclass
from typing import Literal, Optional, TypeVar, Union, cast

from graphql import (
    DefinitionNode,
    DirectiveNode,
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    SelectionNode,
    SelectionSetNode,
    Visitor,
    visit,
)
from graphql.language import REMOVE

from graphql_computed_fields.directives import is_computed_directive, node_has_computed_directives
from graphql_computed_fields.entities import EntityType, TypeName
from graphql_computed_fields.field_set import flatten_selections, merge_selections
from graphql_computed_fields.resolver import FragmentResolver

logger = logging.getLogger(__name__)

RewriteMode = Literal['replace', 'augment']

Query = Union[DefinitionNode, DocumentNode]

TQuery = TypeVar('TQuery', bound=Query)


@dataclass
class RewriteOptions:
    # Raise DependencyCycleError instead of recursing until RecursionError.
    detect_cycles: bool = True


def replace_directives_by_fragments(
    query: Optional[TQuery],
    entities: Mapping[TypeName, EntityType],
    options: Optional[RewriteOptions] = None,
) -> Optional[TQuery]:
    """Replace every @computed field with the selections of its dependency fragment.

    The result carries no @computed directive and has fields sharing a
    response name merged into one.
    """
    if query is None:
        return None

    # Copied so that the result shares no nodes with the caller's query.
    return RewriteContext(entities, 'replace', options).rewrite(deepcopy(query))


def add_fragments_from_directives(
    query: Optional[TQuery],
    entities: Mapping[TypeName, EntityType],
    options: Optional[RewriteOptions] = None,
) -> Optional[TQuery]:
    """Add the selections of each @computed field's dependency fragment next to it.

    The annotated fields and their directives are left in place.
    """
    if query is None:
        return None

    return RewriteContext(entities, 'augment', options).rewrite(deepcopy(query))


class RewriteContext:
    entities: Mapping[TypeName, EntityType]
    mode: RewriteMode
    options: RewriteOptions
    resolver: FragmentResolver

    def __init__(
        self,
        entities: Mapping[TypeName, EntityType],
        mode: RewriteMode,
        options: Optional[RewriteOptions] = None,
    ):
        self.entities = entities
        self.mode = mode
        self.options = options if options is not None else RewriteOptions()
        self.resolver = FragmentResolver(
            entities, self.rewrite_fragment, detect_cycles=self.options.detect_cycles
        )

    def rewrite(self, query: TQuery) -> TQuery:
        logger.debug('Rewriting %s in %s mode', query.kind, self.mode)

        if self.mode == 'replace':
            first_pass = visit(query, ReplaceComputedFieldsVisitor(self.resolver))
            return normalize_selections(cast(TQuery, first_pass))
        else:
            first_pass = visit(query, AugmentComputedFieldsVisitor(self.resolver))
            # Annotated fields were swapped for lists in the first pass.
            return cast(TQuery, visit(first_pass, FlattenSelectionsVisitor()))

    def rewrite_fragment(self, fragment: FragmentDefinitionNode) -> FragmentDefinitionNode:
        return self.rewrite(fragment)


def dependency_selections(fragment: FragmentDefinitionNode) -> list[SelectionNode]:
    # Copied so that the output never shares nodes with the registry.
    return deepcopy(list(fragment.selection_set.selections))


class ReplaceComputedFieldsVisitor(Visitor):
    def __init__(self, resolver: FragmentResolver):
        super().__init__()
        self.resolver = resolver

    def enter_field(self, node: FieldNode, *_) -> Optional[list[SelectionNode]]:
        if not node_has_computed_directives(node):
            return None

        return dependency_selections(self.resolver.resolve(node))


class AugmentComputedFieldsVisitor(Visitor):
    def __init__(self, resolver: FragmentResolver):
        super().__init__()
        self.resolver = resolver

    def enter_field(self, node: FieldNode, *_) -> Optional[list[SelectionNode]]:
        if not node_has_computed_directives(node):
            return None

        return [node, *dependency_selections(self.resolver.resolve(node))]


class FlattenSelectionsVisitor(Visitor):
    def enter_selection_set(self, node: SelectionSetNode, *_) -> SelectionSetNode:
        flattened = copy(node)
        flattened.selections = tuple(flatten_selections(node.selections))
        return flattened


class NormalizeSelectionsVisitor(Visitor):
    def enter_selection_set(self, node: SelectionSetNode, *_) -> SelectionSetNode:
        normalized = copy(node)
        normalized.selections = tuple(merge_selections(node.selections))
        return normalized

    def enter_directive(self, node: DirectiveNode, *_):
        if is_computed_directive(node):
            return REMOVE

        return None


def normalize_selections(query: TQuery) -> TQuery:
    """Run only the cleanup pass of the replace mode over ``query``."""
    return cast(TQuery, visit(query, NormalizeSelectionsVisitor()))
