import pytest

from graphql_computed_fields import Entities, entities_from_sources


@pytest.fixture
def entities() -> Entities:
    return entities_from_sources(
        {
            'User': {
                'fullName': 'fragment FullName on User { firstName lastName }',
                'displayName': '''
                    fragment DisplayName on User {
                        nickname
                        fullName @computed(type: "User")
                    }
                ''',
                'avatar': 'fragment Avatar on User { profile { avatarUrl } }',
                'initials': 'fragment Initials on User { firstName lastName }',
                'age': None,
            },
            'Post': {
                'summary': '''
                    fragment Summary on Post {
                        title
                        author { fullName @computed(type: "User") }
                    }
                ''',
            },
        }
    )
