from graphql import FieldNode, SelectionNode


def get_response_name(node: FieldNode) -> str:
    return node.alias.value if node.alias is not None else node.name.value


def is_field_node(selection: SelectionNode) -> bool:
    return isinstance(selection, FieldNode)
