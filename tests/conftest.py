import pytest
from graphql import build_schema

HASURA_SDL = """
scalar timestamptz
scalar uuid

enum user_role_enum {
  admin
  editor
}

type users {
  id: Int!
  name: String
  email: String!
  role: user_role_enum
  tags: [String!]!
  created_at: timestamptz
  secret_token: String
  _version: Int
  posts: [posts!]!
  profile: profiles
}

type posts {
  id: uuid!
  title: String!
  author_id: Int
}

type profiles {
  user_id: Int!
  bio: String
}

type audit_logs {
  id: Int!
  message: String
}

type userProfiles {
  id: Int!
  displayName: String
}

input users_insert_input {
  name: String
  email: String
  role: user_role_enum
  tags: [String!]
  created_at: timestamptz
  posts: posts_arr_rel_insert_input
}

input posts_arr_rel_insert_input {
  data: [posts_insert_input!]!
}

input posts_insert_input {
  title: String
  author_id: Int
}

input users_set_input {
  name: String
  email: String
  role: user_role_enum
}

input users_pk_columns_input {
  id: Int!
}

input userProfilesInsertInput {
  displayName: String
}

type Query {
  users: [users!]!
  posts: [posts!]!
  audit_logs: [audit_logs!]!
  userProfiles: [userProfiles!]!
}

type Mutation {
  delete_users: Int
  delete_audit_logs: Int
  deleteUserProfiles: Int
}
"""


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")


@pytest.fixture
def hasura_sdl():
    return HASURA_SDL


@pytest.fixture
def hasura_schema():
    return build_schema(HASURA_SDL)


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.graphql"
    path.write_text(HASURA_SDL, encoding="utf-8")
    return path


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty directory without CONFIG_PATH set."""
    monkeypatch.delenv("CONFIG_PATH", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
