from typing import Optional

from graphql import (
    DirectiveNode,
    EnumValueNode,
    ExecutableDefinitionNode,
    Node,
    SelectionNode,
    StringValueNode,
    VariableDefinitionNode,
)

from graphql_computed_fields.errors import InvalidComputedDirectiveError

COMPUTED_DIRECTIVE_NAME = 'computed'


def is_node_with_directives(node: Optional[Node]) -> bool:
    return (
        isinstance(node, (ExecutableDefinitionNode, SelectionNode, VariableDefinitionNode))
        and node.directives is not None
    )


def is_computed_directive(directive: DirectiveNode) -> bool:
    return directive.name.value == COMPUTED_DIRECTIVE_NAME


def node_has_computed_directives(node: Optional[Node]) -> bool:
    if not is_node_with_directives(node):
        return False

    return any(is_computed_directive(directive) for directive in node.directives)


def get_computed_directive(node: Node) -> Optional[DirectiveNode]:
    if not is_node_with_directives(node):
        return None

    return next(
        (directive for directive in node.directives if is_computed_directive(directive)), None
    )


def get_directive_type(directive: Optional[DirectiveNode]) -> str:
    """Return the entity type named by the first argument of a @computed directive.

    Only the first argument is inspected, anything after it is ignored. Its
    value must be a string or enum literal.
    """
    arguments = directive.arguments if directive is not None else None
    value = arguments[0].value if arguments else None

    if not isinstance(value, (StringValueNode, EnumValueNode)):
        raise InvalidComputedDirectiveError(directive)

    return value.value
