import pytest

from settings import (
    DEFAULT_SETTINGS,
    DEFAULT_TITLE_DESCRIPTION,
    ServerConfig,
    ShareSettings,
    ThemeMode,
    TitleSource,
    YamlField,
    api_key_url,
    default_settings,
    field,
    theme_display_name,
    title_source_description,
)


def test_field_joins_prefix_and_name() -> None:
    assert field("share", YamlField.link) == "share_link"
    assert field("share", YamlField.password) == "share_password"


def test_field_with_empty_prefix_is_not_trimmed() -> None:
    assert field("", YamlField.link) == "_link"


def test_settings_field_uses_own_prefix() -> None:
    settings = ShareSettings(yaml_field="pub")
    assert settings.field(YamlField.updated) == "pub_updated"


def test_enum_values_are_stable() -> None:
    assert [int(m) for m in ThemeMode] == [0, 1, 2]
    assert [int(s) for s in TitleSource] == [0, 1, 2]
    assert [f.name for f in YamlField] == [
        "link", "updated", "encrypted", "unencrypted", "title", "expires", "password",
    ]


def test_enum_labels_round_trip() -> None:
    assert ThemeMode.SAME_AS_THEME.label == "Same as theme"
    assert ThemeMode.from_label("Dark") is ThemeMode.DARK
    assert TitleSource.from_label("First H1") is TitleSource.FIRST_H1
    with pytest.raises(ValueError):
        TitleSource.from_label("Nope")


def test_defaults() -> None:
    settings = default_settings()
    assert settings.server == "https://api.note.sx"
    assert settings.servers == [
        ServerConfig(name="Note.sx", url="https://api.note.sx"),
        ServerConfig(name="ObsidianShare", url="https://api.obsidianshare.com"),
    ]
    assert settings.yaml_field == "share"
    assert settings.remove_yaml is True
    assert settings.clipboard is True
    assert settings.share_unencrypted is False
    assert settings.auth_redirect is None
    assert settings.debug == 0


def test_default_settings_returns_independent_copy() -> None:
    settings = default_settings()
    settings.servers.append(ServerConfig(name="X", url="https://x.example"))
    settings.uid = "changed"
    assert len(DEFAULT_SETTINGS.servers) == 2
    assert DEFAULT_SETTINGS.uid == ""


def test_from_dict_missing_servers_uses_defaults() -> None:
    settings = ShareSettings.from_dict({"uid": "u1", "apiKey": "k"})
    assert settings.uid == "u1"
    assert settings.api_key == "k"
    assert settings.servers == DEFAULT_SETTINGS.servers


def test_from_dict_accepts_empty_servers_as_is() -> None:
    settings = ShareSettings.from_dict({"servers": []})
    assert settings.servers == []


def test_from_dict_ignores_unknown_keys() -> None:
    settings = ShareSettings.from_dict({"someFutureKey": 1, "noteWidth": "800px"})
    assert settings.note_width == "800px"
    assert not hasattr(settings, "someFutureKey")


def test_from_dict_converts_enums() -> None:
    settings = ShareSettings.from_dict({"themeMode": 2, "titleSource": 1})
    assert settings.theme_mode is ThemeMode.LIGHT
    assert settings.title_source is TitleSource.FIRST_H1


def test_from_dict_invalid_enum_falls_back() -> None:
    settings = ShareSettings.from_dict({"themeMode": 9})
    assert settings.theme_mode is ThemeMode.SAME_AS_THEME


@pytest.mark.parametrize("servers", [5, "https://a.example", {"name": "A"}, None])
def test_from_dict_invalid_servers_falls_back(servers) -> None:
    settings = ShareSettings.from_dict({"servers": servers, "uid": "u1"})
    assert settings.servers == DEFAULT_SETTINGS.servers
    assert settings.uid == "u1"


def test_from_dict_coerces_server_fields_to_str() -> None:
    settings = ShareSettings.from_dict({"servers": [{"name": 7, "url": "https://a.example"}, "junk"]})
    assert settings.servers == [ServerConfig(name="7", url="https://a.example")]


def test_from_dict_non_record_gives_defaults() -> None:
    assert ShareSettings.from_dict(None) == default_settings()
    assert ShareSettings.from_dict(["x"]) == default_settings()


def test_to_dict_uses_persisted_shape() -> None:
    settings = ShareSettings(theme_mode=ThemeMode.DARK, share_unencrypted=True)
    data = settings.to_dict()
    assert data["themeMode"] == 1
    assert data["titleSource"] == 0
    assert data["shareUnencrypted"] is True
    assert data["servers"][0] == {"name": "Note.sx", "url": "https://api.note.sx"}
    assert ShareSettings.from_dict(data) == settings


def test_title_source_description() -> None:
    settings = ShareSettings()
    assert title_source_description(settings) == DEFAULT_TITLE_DESCRIPTION

    settings.title_source = TitleSource.FRONTMATTER_PROPERTY
    settings.yaml_field = "pub"
    assert "`pub_title`" in title_source_description(settings)


def test_theme_display_name() -> None:
    assert theme_display_name(ShareSettings()) == "Obsidian default theme"
    assert theme_display_name(ShareSettings(theme="Minimal")) == "Minimal"


def test_api_key_url() -> None:
    settings = ShareSettings(server="https://api.note.sx", uid="abc123")
    assert api_key_url(settings) == "https://api.note.sx/v1/account/get-key?id=abc123"
