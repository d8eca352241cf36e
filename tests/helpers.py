from graphql import parse, print_ast


def assert_printed(node, expected: str) -> None:
    assert node is not None
    assert print_ast(node) == print_ast(parse(expected))
