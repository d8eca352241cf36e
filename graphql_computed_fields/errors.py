from typing import Optional, Sequence

from graphql import GraphQLError, Node


class ComputedDirectiveError(GraphQLError):
    """Base class for every failure raised while rewriting @computed fields."""


class InvalidComputedDirectiveError(ComputedDirectiveError):
    def __init__(self, node: Optional[Node] = None):
        super().__init__(
            'Invalid @computed directive found. No type specified',
            [node] if node is not None else None,
        )


class UnknownEntityTypeError(ComputedDirectiveError):
    def __init__(self, type_name: str, node: Optional[Node] = None):
        super().__init__(
            f'No entity found for type "{type_name}"', [node] if node is not None else None
        )
        self.type_name = type_name


class UnknownComputedFieldError(ComputedDirectiveError):
    def __init__(self, type_name: str, field_name: str, node: Optional[Node] = None):
        super().__init__(
            f'No resolver found for @computed directive "{field_name}" in type "{type_name}"',
            [node] if node is not None else None,
        )
        self.type_name = type_name
        self.field_name = field_name


class MissingDependencyError(ComputedDirectiveError):
    def __init__(self, type_name: str, field_name: str, node: Optional[Node] = None):
        super().__init__(
            f'Computed field "{type_name}.{field_name}" declares no dependencies',
            [node] if node is not None else None,
        )
        self.type_name = type_name
        self.field_name = field_name


class MalformedDependencyError(ComputedDirectiveError):
    def __init__(self, type_name: str, field_name: str, reason: str, node: Optional[Node] = None):
        super().__init__(
            f'Dependencies of computed field "{type_name}.{field_name}" are malformed: {reason}',
            [node] if node is not None else None,
        )
        self.type_name = type_name
        self.field_name = field_name


class DependencyCycleError(ComputedDirectiveError):
    def __init__(self, chain: Sequence[tuple[str, str]], node: Optional[Node] = None):
        self.chain = list(chain)
        path = ' -> '.join(f'{type_name}.{field_name}' for type_name, field_name in self.chain)
        super().__init__(
            f'Cyclic @computed dependencies: {path}', [node] if node is not None else None
        )
