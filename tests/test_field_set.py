from graphql import FieldNode, OperationDefinitionNode, SelectionSetNode, parse, print_ast

from graphql_computed_fields.field_set import (
    flatten_selections,
    group_by_response_name,
    merge_fields,
    merge_selections,
)


def selections_of(source: str) -> list:
    operation = parse(source).definitions[0]
    assert isinstance(operation, OperationDefinitionNode)
    return list(operation.selection_set.selections)


def printed(selections) -> str:
    return print_ast(SelectionSetNode(selections=selections))


class TestFlattenSelections:
    def test_flattens_one_level(self) -> None:
        a, b, c = selections_of('{ a b c }')
        assert flatten_selections([a, [b, c]]) == [a, b, c]
        assert flatten_selections([(a,), b, [c]]) == [a, b, c]

    def test_flat_input_is_unchanged(self) -> None:
        a, b = selections_of('{ a b }')
        assert flatten_selections([a, b]) == [a, b]


class TestGroupByResponseName:
    def test_groups_on_alias(self) -> None:
        groups = group_by_response_name(selections_of('{ name first: name second: name name }'))
        assert list(groups) == ['name', 'first', 'second']
        assert len(groups['name']) == 2


class TestMergeFields:
    def test_single_field_is_returned_as_is(self) -> None:
        (field,) = selections_of('{ a { b } }')
        assert merge_fields([field]) is field

    def test_sub_selections_are_concatenated(self) -> None:
        first, second = selections_of('{ profile { a } profile { b } }')
        merged = merge_fields([first, second])
        assert isinstance(merged, FieldNode)
        assert isinstance(merged.selection_set.selections, tuple)
        assert print_ast(merged) == 'profile {\n  a\n  b\n}'

    def test_directives_and_arguments_are_concatenated(self) -> None:
        first, second = selections_of('{ a(x: 1) @include(if: true) a(y: 2) }')
        merged = merge_fields([first, second])
        assert [argument.name.value for argument in merged.arguments] == ['x', 'y']
        assert [directive.name.value for directive in merged.directives] == ['include']

    def test_inputs_are_not_mutated(self) -> None:
        first, second = selections_of('{ profile { a } profile { b } }')
        merge_fields([first, second])
        assert print_ast(first) == 'profile {\n  a\n}'
        assert print_ast(second) == 'profile {\n  b\n}'


class TestMergeSelections:
    def test_non_fields_come_first(self) -> None:
        selections = selections_of('{ id ... on Admin { role } ...UserFields name }')
        assert printed(merge_selections(selections)) == print_ast(
            parse('{ ... on Admin { role } ...UserFields id name }').definitions[0].selection_set
        )

    def test_merges_nested_lists(self) -> None:
        id_, first, second = selections_of('{ id profile { a } profile { b } }')
        merged = merge_selections([id_, [first, second]])
        assert len(merged) == 2
        assert print_ast(merged[1]) == 'profile {\n  a\n  b\n}'

    def test_keeps_first_seen_order(self) -> None:
        selections = selections_of('{ b a b }')
        assert [field.name.value for field in merge_selections(selections)] == ['b', 'a']
