"""Immutable autolink configuration.

Options arrive as a plain mapping (the way templates and views pass them)
or as an AutolinkConfig. Either way they are turned into a frozen value once
per call; the caller's mapping is never modified.

Usage:
    config = AutolinkConfig.from_dict({"target": "_blank", "suppress_lists": True})
    config.with_defaults().url_class   # 'tweet-url'

    # Keys that are not options become extra HTML attributes on URL anchors
    AutolinkConfig.from_dict({"title": "external"}).extra_attributes
    # mappingproxy({'title': 'external'})

"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from tweetlink.errors import ConfigError

DEFAULT_URL_CLASS = "tweet-url"
DEFAULT_LIST_CLASS = "list-slug"
DEFAULT_USERNAME_CLASS = "username"
DEFAULT_HASHTAG_CLASS = "hashtag"
DEFAULT_USERNAME_URL_BASE = "http://twitter.com/"
DEFAULT_LIST_URL_BASE = "http://twitter.com/"
DEFAULT_HASHTAG_URL_BASE = "http://twitter.com/search?q=%23"
# None adds no target attribute
DEFAULT_TARGET: str | None = None

_RESOLVER_FIELDS = (
    "username_url_resolver",
    "list_url_resolver",
    "hashtag_url_resolver",
    "link_url_resolver",
)
_NON_OPTION_FIELDS = frozenset(("extra_attributes", "option_order"))


@dataclass(frozen=True, slots=True)
class UrlEntity:
    """Caller-supplied metadata for one URL.

    Attributes:
        url: The URL exactly as it appears in the text
        display_url: Text to show instead of the raw URL
        expanded_url: Fully expanded target; carried along, not rendered

    """

    url: str
    display_url: str | None = None
    expanded_url: str | None = None

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "UrlEntity":
        """Create a UrlEntity from a mapping with url/display_url/expanded_url keys."""
        url = record.get("url")
        if not url:
            raise ConfigError("url_entities", f"record without a url: {dict(record)!r}")
        return cls(
            url=url,
            display_url=record.get("display_url"),
            expanded_url=record.get("expanded_url"),
        )


def _coerce_url_entities(records: Iterable[UrlEntity | Mapping[str, Any]] | None) -> tuple[UrlEntity, ...]:
    if not records:
        return ()
    result: list[UrlEntity] = []
    for record in records:
        if isinstance(record, UrlEntity):
            result.append(record)
        elif isinstance(record, Mapping):
            result.append(UrlEntity.from_dict(record))
        else:
            raise ConfigError("url_entities", f"expected a mapping or UrlEntity, got {type(record).__name__}")
    return tuple(result)


@dataclass(frozen=True, slots=True)
class AutolinkConfig:
    """Immutable autolink options.

    Unset values are None (or False for flags); with_defaults() fills in the
    documented defaults for the hashtag and username/list passes. The URL
    pass uses the values as given.

    Attributes:
        url_class: CSS class added to every anchor
        list_class: Extra class for list anchors
        username_class: Extra class for username anchors
        hashtag_class: Extra class for hashtag anchors
        username_url_base: Prefix for username hrefs
        list_url_base: Prefix for list hrefs
        hashtag_url_base: Prefix for hashtag hrefs
        target: Window name emitted as a target attribute
        suppress_lists: Link @user/list as a plain username
        suppress_no_follow: Leave out rel="nofollow"
        username_url_resolver: Callable(username) -> href
        list_url_resolver: Callable(lowercased user/list) -> href
        hashtag_url_resolver: Callable(hashtag) -> href
        link_url_resolver: Callable(url) -> href
        url_entities: Display overrides for URLs
        extra_attributes: Any other option; rendered as attributes on URL anchors
        option_order: Key order of the mapping the config was built from; as_options
            follows it so attributes render in the order the caller wrote them

    """

    url_class: str | None = None
    list_class: str | None = None
    username_class: str | None = None
    hashtag_class: str | None = None
    username_url_base: str | None = None
    list_url_base: str | None = None
    hashtag_url_base: str | None = None
    target: str | None = DEFAULT_TARGET
    suppress_lists: bool = False
    suppress_no_follow: bool = False
    username_url_resolver: Callable[[str], str] | None = None
    list_url_resolver: Callable[[str], str] | None = None
    hashtag_url_resolver: Callable[[str], str] | None = None
    link_url_resolver: Callable[[str], str] | None = None
    url_entities: tuple[UrlEntity, ...] = ()
    extra_attributes: Mapping[str, Any] = field(default_factory=dict, hash=False)
    option_order: tuple[str, ...] = field(default=(), compare=False, repr=False)

    def __post_init__(self) -> None:
        for name in _RESOLVER_FIELDS:
            resolver = getattr(self, name)
            if resolver is not None and not callable(resolver):
                raise ConfigError(name, f"expected a callable, got {type(resolver).__name__}")
        object.__setattr__(self, "url_entities", _coerce_url_entities(self.url_entities))
        object.__setattr__(self, "extra_attributes", MappingProxyType(dict(self.extra_attributes)))

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "AutolinkConfig":
        """Create AutolinkConfig from an option mapping.

        Keys matching a field set that field. Every other key is kept in
        extra_attributes, in the order given.

        Args:
            options: Option name to value

        Returns:
            New AutolinkConfig

        Raises:
            ConfigError: If a resolver is not callable or a URL entity is malformed

        Example:
            >>> config = AutolinkConfig.from_dict({"hashtag_class": "tag", "data-x": "1"})
            >>> config.hashtag_class
            'tag'
            >>> dict(config.extra_attributes)
            {'data-x': '1'}

        """
        valid_fields = {f.name for f in dataclasses.fields(cls)} - _NON_OPTION_FIELDS
        known = {k: v for k, v in options.items() if k in valid_fields}
        extra = dict(options.get("extra_attributes") or {})
        extra.update((k, v) for k, v in options.items() if k not in valid_fields and k != "extra_attributes")
        order: list[str] = []
        for key in options:
            order.extend((options[key] or ()) if key == "extra_attributes" else (key,))
        return cls(**known, extra_attributes=extra, option_order=tuple(order))

    @classmethod
    def coerce(cls, options: "AutolinkConfig | Mapping[str, Any] | None") -> "AutolinkConfig":
        """Accept None, a mapping, or a config and return a config."""
        if options is None:
            return _EMPTY_CONFIG
        if isinstance(options, AutolinkConfig):
            return options
        return cls.from_dict(options)

    def with_defaults(self) -> "AutolinkConfig":
        """Return a copy with falsy classes and URL bases replaced by defaults."""
        return dataclasses.replace(
            self,
            url_class=self.url_class or DEFAULT_URL_CLASS,
            list_class=self.list_class or DEFAULT_LIST_CLASS,
            username_class=self.username_class or DEFAULT_USERNAME_CLASS,
            hashtag_class=self.hashtag_class or DEFAULT_HASHTAG_CLASS,
            username_url_base=self.username_url_base or DEFAULT_USERNAME_URL_BASE,
            list_url_base=self.list_url_base or DEFAULT_LIST_URL_BASE,
            hashtag_url_base=self.hashtag_url_base or DEFAULT_HASHTAG_URL_BASE,
            target=self.target or DEFAULT_TARGET,
        )

    def as_options(self) -> dict[str, Any]:
        """Return the options that were set, followed by extra attributes.

        Unset fields (None, False, empty) are left out so they cannot
        override attributes the caller passed separately. Keys recorded in
        option_order come first, in that order.
        """
        options: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            if f.name in _NON_OPTION_FIELDS:
                continue
            value = getattr(self, f.name)
            if value is None or value is False or value == ():
                continue
            options[f.name] = value
        options.update(self.extra_attributes)
        ordered = {k: options[k] for k in self.option_order if k in options}
        ordered.update(options)
        return ordered

    def display_urls(self) -> dict[str, str]:
        """Map raw URL to display text for records that carry one."""
        return {e.url: e.display_url for e in self.url_entities if e.display_url}


_EMPTY_CONFIG: AutolinkConfig = AutolinkConfig()


__all__ = [
    "DEFAULT_HASHTAG_CLASS",
    "DEFAULT_HASHTAG_URL_BASE",
    "DEFAULT_LIST_CLASS",
    "DEFAULT_LIST_URL_BASE",
    "DEFAULT_TARGET",
    "DEFAULT_URL_CLASS",
    "DEFAULT_USERNAME_CLASS",
    "DEFAULT_USERNAME_URL_BASE",
    "AutolinkConfig",
    "UrlEntity",
]
