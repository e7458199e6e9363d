import pytest

from envscaffold import ConfigError, EntryDeclaration, Importance, load_entries, save_entries


def test_load_entries(tmp_path):
    path = tmp_path / "schema.toml"
    path.write_text(
        '[[entry]]\n'
        'name = "LOGLEVEL"\n'
        'title = "Log level"\n'
        'description = "The required level for a message to be logged"\n'
        'options = "debug | info | warn | error"\n'
        'default = "info"\n'
        'importance = "error"\n'
        '\n'
        '[[entry]]\n'
        'name = "API_TOKEN"\n'
        'title = "Api token"\n'
        'description = "Token for the upstream API"\n'
        'options = "any string"\n'
        'importance = "warn"\n',
        encoding="utf-8",
    )

    entries = load_entries(path)

    assert [e.name for e in entries] == ["LOGLEVEL", "API_TOKEN"]
    assert entries[0].default == "info"
    assert entries[1].default is None
    assert entries[1].importance is Importance.WARN


def test_save_then_load(tmp_path):
    entries = [
        EntryDeclaration(
            name="LOGLEVEL",
            title="Log level",
            description="The required level for a message to be logged",
            options="debug | info",
            default="info",
            importance="error",
        ),
        EntryDeclaration(
            name="COLOR", title="Color", description="", options="", importance="ignore"
        ),
    ]
    path = tmp_path / "nested" / "schema.toml"

    save_entries(entries, path)

    assert load_entries(path) == entries
    assert "default" not in path.read_text(encoding="utf-8").split("[[entry]]")[2]


def test_missing_schema_file(tmp_path):
    with pytest.raises(ConfigError, match="Schema file not found"):
        load_entries(tmp_path / "absent.toml")


def test_invalid_toml(tmp_path):
    path = tmp_path / "schema.toml"
    path.write_text("[[entry]\nname = ", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse TOML schema"):
        load_entries(path)


def test_invalid_importance(tmp_path):
    path = tmp_path / "schema.toml"
    path.write_text(
        '[[entry]]\nname = "A"\ntitle = "A"\ndescription = ""\noptions = ""\nimportance = "fatal"\n',
        encoding="utf-8",
    )

    with pytest.raises(ConfigError, match="Invalid entry"):
        load_entries(path)


def test_entry_must_be_array_of_tables(tmp_path):
    path = tmp_path / "schema.toml"
    path.write_text('[entry]\nname = "A"\n', encoding="utf-8")

    with pytest.raises(ConfigError, match="must be an array of tables"):
        load_entries(path)
