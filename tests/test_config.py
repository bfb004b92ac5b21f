"""Tests for AutolinkConfig and UrlEntity."""

import dataclasses

import pytest

from tweetlink.config import (
    DEFAULT_HASHTAG_URL_BASE,
    DEFAULT_URL_CLASS,
    AutolinkConfig,
    UrlEntity,
)
from tweetlink.errors import ConfigError


class TestFromDict:
    def test_known_keys_set_fields(self) -> None:
        config = AutolinkConfig.from_dict({"hashtag_class": "tag", "suppress_lists": True})

        assert config.hashtag_class == "tag"
        assert config.suppress_lists is True
        # Unset values stay unset until with_defaults()
        assert config.url_class is None

    def test_unknown_keys_become_extra_attributes(self) -> None:
        config = AutolinkConfig.from_dict({"title": "t", "data-id": "7", "target": "_top"})

        assert dict(config.extra_attributes) == {"title": "t", "data-id": "7"}
        assert config.target == "_top"

    def test_empty(self) -> None:
        assert AutolinkConfig.from_dict({}) == AutolinkConfig()

    def test_does_not_mutate_input(self) -> None:
        options = {"url_entities": [{"url": "http://t.co/x", "display_url": "x.com"}], "rel": "me"}
        snapshot = {"url_entities": [{"url": "http://t.co/x", "display_url": "x.com"}], "rel": "me"}

        AutolinkConfig.from_dict(options)

        assert options == snapshot

    def test_url_entity_mappings_converted(self) -> None:
        config = AutolinkConfig.from_dict(
            {"url_entities": [{"url": "http://t.co/x", "display_url": "x.com", "expanded_url": "http://x.com"}]}
        )

        assert config.url_entities == (
            UrlEntity(url="http://t.co/x", display_url="x.com", expanded_url="http://x.com"),
        )


class TestCoerce:
    def test_none_gives_empty_config(self) -> None:
        assert AutolinkConfig.coerce(None) == AutolinkConfig()

    def test_config_returned_as_is(self) -> None:
        config = AutolinkConfig(target="_blank")
        assert AutolinkConfig.coerce(config) is config

    def test_mapping(self) -> None:
        assert AutolinkConfig.coerce({"target": "_blank"}).target == "_blank"


class TestWithDefaults:
    def test_fills_defaults(self) -> None:
        config = AutolinkConfig().with_defaults()

        assert config.url_class == DEFAULT_URL_CLASS
        assert config.list_class == "list-slug"
        assert config.username_class == "username"
        assert config.hashtag_class == "hashtag"
        assert config.username_url_base == "http://twitter.com/"
        assert config.list_url_base == "http://twitter.com/"
        assert config.hashtag_url_base == DEFAULT_HASHTAG_URL_BASE
        assert config.target is None

    def test_caller_values_win(self) -> None:
        config = AutolinkConfig(url_class="link", username_url_base="/u/").with_defaults()

        assert config.url_class == "link"
        assert config.username_url_base == "/u/"

    def test_empty_string_replaced(self) -> None:
        assert AutolinkConfig(url_class="").with_defaults().url_class == DEFAULT_URL_CLASS

    def test_original_unchanged(self) -> None:
        config = AutolinkConfig()
        config.with_defaults()
        assert config.url_class is None

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            AutolinkConfig().target = "_blank"  # type: ignore[misc]


class TestAsOptions:
    def test_only_set_values(self) -> None:
        config = AutolinkConfig(url_class="link", target="_blank")
        assert config.as_options() == {"url_class": "link", "target": "_blank"}

    def test_follows_caller_key_order(self) -> None:
        config = AutolinkConfig.from_dict({"title": "t", "target": "_blank"})
        assert list(config.as_options()) == ["title", "target"]

    def test_nested_extra_attributes_keep_their_position(self) -> None:
        config = AutolinkConfig.from_dict(
            {"data-a": "1", "extra_attributes": {"data-b": "2"}, "target": "_top"}
        )
        assert list(config.as_options()) == ["data-a", "data-b", "target"]

    def test_direct_construction_uses_field_order(self) -> None:
        config = AutolinkConfig(target="_blank", extra_attributes={"title": "t"})
        assert list(config.as_options()) == ["target", "title"]

    def test_empty(self) -> None:
        assert AutolinkConfig().as_options() == {}


class TestDisplayUrls:
    def test_only_records_with_display_url(self) -> None:
        config = AutolinkConfig(
            url_entities=(UrlEntity("http://a.co/1", "a.co/one"), UrlEntity("http://b.co/2"))
        )
        assert config.display_urls() == {"http://a.co/1": "a.co/one"}

    def test_later_record_wins(self) -> None:
        config = AutolinkConfig(
            url_entities=(UrlEntity("http://a.co/1", "first"), UrlEntity("http://a.co/1", "second"))
        )
        assert config.display_urls() == {"http://a.co/1": "second"}


class TestValidation:
    def test_non_callable_resolver(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            AutolinkConfig.from_dict({"hashtag_url_resolver": "/tags/"})

        assert exc_info.value.option == "hashtag_url_resolver"
        assert "callable" in str(exc_info.value)

    def test_url_entity_without_url(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            AutolinkConfig.from_dict({"url_entities": [{"display_url": "x.com"}]})

        assert exc_info.value.option == "url_entities"

    def test_url_entity_wrong_type(self) -> None:
        with pytest.raises(ConfigError):
            AutolinkConfig(url_entities=("http://x.com",))  # type: ignore[arg-type]


class TestHashing:
    def test_hashable(self) -> None:
        assert hash(AutolinkConfig()) == hash(AutolinkConfig.from_dict({}))

    def test_hashable_with_extras(self) -> None:
        config = AutolinkConfig.from_dict({"title": "t", "url_entities": [{"url": "http://a.co"}]})
        assert {config: 1}[config] == 1

    def test_key_order_does_not_affect_equality(self) -> None:
        a = AutolinkConfig.from_dict({"title": "t", "target": "_blank"})
        b = AutolinkConfig.from_dict({"target": "_blank", "title": "t"})
        assert a == b
        assert hash(a) == hash(b)
