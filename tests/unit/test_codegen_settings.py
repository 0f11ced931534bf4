import pytest

from hasura_codegen.config import (
    CodegenSettings,
    coerce_name_list,
    interpolate_env,
    load_codegen_settings,
    parse_schema_config,
    settings_from_config,
)
from hasura_codegen.exceptions import (
    ConfigurationError,
    InvalidFieldRuleError,
    InvalidSchemaConfigError,
)
from hasura_codegen.utils import is_valid_name_list, parse_array_string

pytestmark = pytest.mark.unit


def test_parse_array_string_trims_and_drops_blanks():
    assert parse_array_string(" id, created_at ,,updated_at ") == ["id", "created_at", "updated_at"]
    assert parse_array_string("") == []


@pytest.mark.parametrize("value", ["", "id", "id,name", " id , _ ,created_at,", "_internal"])
def test_valid_name_lists(value):
    assert is_valid_name_list(value) is True


@pytest.mark.parametrize("value", ["created-at", "id;name", ",", "id,,name", "a b"])
def test_invalid_name_lists(value):
    assert is_valid_name_list(value) is False


def test_coerce_name_list_accepts_lists_and_strings():
    assert coerce_name_list("models", "users, posts") == ["users", "posts"]
    assert coerce_name_list("models", ["users", None, " posts "]) == ["users", "posts"]
    assert coerce_name_list("models", None) == []


def test_coerce_name_list_rejects_malformed_rules():
    with pytest.raises(InvalidFieldRuleError) as excinfo:
        coerce_name_list("disable_fields", "created-at")
    assert excinfo.value.option_name == "disable_fields"
    with pytest.raises(InvalidFieldRuleError):
        coerce_name_list("head_fields", 42)


def test_interpolate_env_with_defaults():
    variables = {"HASURA_ROLE": "editor", "EMPTY": ""}
    text = "role: ${HASURA_ROLE}\nsecret: ${MISSING}\nurl: ${EMPTY:http://localhost:8080/v1/graphql}"
    assert interpolate_env(text, variables) == (
        "role: editor\nsecret: \nurl: http://localhost:8080/v1/graphql"
    )


def test_schema_config_as_string():
    assert parse_schema_config("schema.graphql") == {"schema": "schema.graphql"}


def test_schema_config_as_list_with_headers():
    result = parse_schema_config([
        {
            "http://localhost:8080/v1/graphql": {
                "headers": {"X-Hasura-Admin-Secret": "s3cret", "x-hasura-role": "editor"},
            }
        }
    ])
    assert result["schema"] == "http://localhost:8080/v1/graphql"
    assert result["method"] == "POST"
    assert result["admin_secret"] == "s3cret"
    assert result["role"] == "editor"
    assert result["headers"]["X-Hasura-Admin-Secret"] == "s3cret"


def test_schema_config_as_list_of_strings():
    assert parse_schema_config(["schema.json"]) == {"schema": "schema.json"}


@pytest.mark.parametrize("value, described", [({"url": "x"}, "object"), (42, "number"), (True, "boolean")])
def test_schema_config_with_wrong_shape(value, described):
    with pytest.raises(InvalidSchemaConfigError) as excinfo:
        parse_schema_config(value)
    assert f"got {described}" in str(excinfo.value)


def test_settings_from_config_reads_hasura_section():
    settings = settings_from_config({
        "schema": "schema.graphql",
        "hasura": {
            "models": "users,posts",
            "disableFields": ["secret_token"],
            "disableFieldPrefixes": "_",
            "headFields": "id",
            "tailFields": ["created_at", "updated_at"],
            "separateFiles": "true",
            "outputPath": "generated",
            "outputFilePrefix": "model_",
            "maxDepth": 2,
            "enableQuery": True,
        },
    })
    assert settings.schema == "schema.graphql"
    assert settings.models == ["users", "posts"]
    assert settings.disable_fields == ["secret_token"]
    assert settings.disable_field_prefixes == ["_"]
    assert settings.head_fields == ["id"]
    assert settings.tail_fields == ["created_at", "updated_at"]
    assert settings.primary_key_names == ["id"]
    assert settings.separate_files is True
    assert settings.output_path == "generated"
    assert settings.output_file_prefix == "model_"


def test_schema_entry_wins_over_hasura_url():
    settings = settings_from_config({"schema": "b.graphql", "hasura": {"url": "a.graphql"}})
    assert settings.schema == "b.graphql"
    assert settings_from_config({"hasura": {"url": "a.graphql"}}).schema == "a.graphql"


def test_settings_from_empty_or_invalid_payload():
    assert settings_from_config(None) == CodegenSettings()
    with pytest.raises(ConfigurationError):
        settings_from_config(["not", "a", "mapping"])
    with pytest.raises(ConfigurationError):
        settings_from_config({"hasura": {"format": "xml"}})


def test_filter_options_from_settings():
    settings = CodegenSettings(disable_fields=["a"], head_fields=["id"], primary_key_names=["id", "uuid"])
    options = settings.filter_options()
    assert options.disable_fields == ("a",)
    assert options.head_fields == ("id",)
    assert options.primary_key_names == ("id", "uuid")


def test_merge_overrides_ignores_none_and_parses_lists():
    settings = CodegenSettings(models=["users"], output_path="out")
    merged = settings.merge_overrides(models="posts,comments", output_path=None, separate_files=True)
    assert merged.models == ["posts", "comments"]
    assert merged.output_path == "out"
    assert merged.separate_files is True
    assert settings.models == ["users"]
    with pytest.raises(ConfigurationError):
        settings.merge_overrides(max_depth=2)


def test_validate_requires_schema_and_models():
    with pytest.raises(ConfigurationError) as excinfo:
        CodegenSettings(models=["users"]).validate()
    assert excinfo.value.option_name == "schema"
    with pytest.raises(ConfigurationError) as excinfo:
        CodegenSettings(schema="schema.graphql").validate()
    assert excinfo.value.option_name == "models"


def test_load_settings_from_default_file(isolated_cwd):
    (isolated_cwd / "codegen.yml").write_text(
        "schema: schema.graphql\nhasura:\n  models: users\n", encoding="utf-8"
    )
    settings = load_codegen_settings(env_file=str(isolated_cwd / "missing.env"))
    assert settings.schema == "schema.graphql"
    assert settings.models == ["users"]


def test_load_settings_falls_back_to_yaml_extension(isolated_cwd):
    (isolated_cwd / "codegen.yaml").write_text("hasura:\n  models: [posts]\n", encoding="utf-8")
    settings = load_codegen_settings(env_file=str(isolated_cwd / "missing.env"))
    assert settings.models == ["posts"]


def test_config_path_env_wins_over_argument(isolated_cwd, monkeypatch):
    (isolated_cwd / "from_env.yml").write_text("hasura:\n  models: users\n", encoding="utf-8")
    (isolated_cwd / "from_arg.yml").write_text("hasura:\n  models: posts\n", encoding="utf-8")
    monkeypatch.setenv("CONFIG_PATH", str(isolated_cwd / "from_env.yml"))
    settings = load_codegen_settings("from_arg.yml", env_file=str(isolated_cwd / "missing.env"))
    assert settings.models == ["users"]


def test_missing_config_file_returns_defaults(isolated_cwd, caplog):
    settings = load_codegen_settings(env_file=str(isolated_cwd / "missing.env"))
    assert settings == CodegenSettings()
    assert "the config file is not found" in caplog.text


def test_invalid_yaml_is_a_configuration_error(isolated_cwd):
    (isolated_cwd / "codegen.yml").write_text("hasura: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_codegen_settings(env_file=str(isolated_cwd / "missing.env"))


def test_dotenv_values_are_interpolated(isolated_cwd, monkeypatch):
    # Registered with monkeypatch so the value loaded from .env is undone.
    monkeypatch.setenv("HCG_TEST_ROLE", "")
    monkeypatch.delenv("HCG_TEST_ROLE")
    (isolated_cwd / ".env").write_text("HCG_TEST_ROLE=editor\n", encoding="utf-8")
    (isolated_cwd / "codegen.yml").write_text(
        "schema:\n"
        "  - http://localhost:8080/v1/graphql:\n"
        "      headers:\n"
        "        x-hasura-role: ${HCG_TEST_ROLE}\n"
        "hasura:\n"
        "  models: users\n",
        encoding="utf-8",
    )
    settings = load_codegen_settings(env_file=str(isolated_cwd / ".env"))
    assert settings.role == "editor"
    assert settings.headers == {"x-hasura-role": "editor"}


@pytest.mark.parametrize("headers", [["x-hasura-role"], "x-hasura-role: editor"])
def test_schema_headers_must_be_a_mapping(headers):
    with pytest.raises(ConfigurationError) as excinfo:
        parse_schema_config([{"schema.graphql": {"headers": headers}}])
    assert excinfo.value.option_name == "headers"


def test_hasura_headers_must_be_a_mapping():
    with pytest.raises(ConfigurationError) as excinfo:
        settings_from_config({"hasura": {"headers": ["x-hasura-role"]}})
    assert excinfo.value.option_name == "headers"
    settings = settings_from_config({"hasura": {"headers": {"x-hasura-role": "editor"}}})
    assert settings.headers == {"x-hasura-role": "editor"}


def test_missing_requested_file_falls_back_to_yaml_extension(isolated_cwd):
    (isolated_cwd / "codegen.yaml").write_text("hasura:\n  models: comments\n", encoding="utf-8")
    settings = load_codegen_settings("custom.yml", env_file=str(isolated_cwd / "missing.env"))
    assert settings.models == ["comments"]
