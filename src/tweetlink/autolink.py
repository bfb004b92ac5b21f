"""Entity-to-anchor rewriting.

Each pass finds one kind of entity with the detectors in
:mod:`tweetlink.detection` and replaces every match with an ``<a>`` element:

- auto_link_hashtags: ``#tag`` -> search link
- auto_link_urls_custom: ``http://...`` -> link to the URL itself
- auto_link_usernames_or_lists: ``@user`` / ``@user/list`` -> profile or list link

auto_link() runs all three, hashtags first, then URLs, then usernames and
lists. Detectors skip existing markup, so a later pass never links inside an
anchor emitted by an earlier one.

Options may be a mapping or an AutolinkConfig; html_options is a mapping of
extra attributes for every anchor. Neither is modified.

Example:
    >>> auto_link("Check #ruby and @jack's http://example.com")  # doctest: +ELLIPSIS
    'Check <a href="http://twitter.com/search?q=%23ruby" title="#ruby" ...'

Thread Safety:
All state is local to each call. Resolvers are invoked synchronously,
once per match, in text order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from tweetlink.attributes import HTML_ATTR_NO_FOLLOW, html_attrs_for_options
from tweetlink.config import AutolinkConfig
from tweetlink.detection import (
    EntityMatch,
    detect_hashtags,
    detect_urls,
    detect_usernames_or_lists,
)
from tweetlink.resolvers import BaseUrlResolver, EscapedUrlResolver, LinkResolver
from tweetlink.utils.logger import get_logger
from tweetlink.utils.text import html_escape

logger = get_logger(__name__)

Options = AutolinkConfig | Mapping[str, Any] | None
Transform = Callable[[str], str] | None


def _link_attributes(config: AutolinkConfig, attributes: Mapping[str, Any] | None) -> dict[str, Any]:
    """Copy attributes and add target and rel as configured."""
    merged = dict(attributes or {})
    if config.target:
        merged["target"] = config.target
    if not config.suppress_no_follow:
        merged.update(HTML_ATTR_NO_FOLLOW)
    return merged


def _as_text(text: Any) -> str:
    return "" if text is None else str(text)


def auto_link_hashtags(
    text: str | None,
    options: Options = None,
    html_options: Mapping[str, Any] | None = None,
    transform: Transform = None,
) -> str:
    """Wrap hashtags in anchors.

    The href is ``hashtag_url_resolver(tag)`` when that option is set, else
    the hashtag URL base followed by the tag. The title is always ``#tag``,
    even when the text used a full-width marker.

    Args:
        text: Text to link
        options: AutolinkConfig or option mapping; defaults fill unset values
        html_options: Extra attributes for each anchor
        transform: Applied to each hashtag before the href and text are built

    Returns:
        Text with hashtags linked
    """
    text = _as_text(text)
    config = AutolinkConfig.coerce(options).with_defaults()
    extra_html = html_attrs_for_options(_link_attributes(config, html_options))
    resolve: LinkResolver = config.hashtag_url_resolver or BaseUrlResolver(config.hashtag_url_base or "")
    css = f"{html_escape(config.url_class)} {html_escape(config.hashtag_class)}"
    linked = 0

    def render(match: EntityMatch) -> str:
        nonlocal linked
        hashtag = transform(match.value) if transform else match.value
        href = resolve(hashtag)
        tag = html_escape(hashtag)
        linked += 1
        return (
            f'<a href="{href}" title="#{tag}" class="{css}"{extra_html}>'
            f"{html_escape(match.marker)}{tag}</a>"
        )

    result = detect_hashtags(text, render)
    logger.debug("Linked %d hashtag(s)", linked)
    return result


def auto_link_usernames_or_lists(
    text: str | None,
    options: Options = None,
    html_options: Mapping[str, Any] | None = None,
    transform: Transform = None,
) -> str:
    """Wrap @usernames and @username/list references in anchors.

    The at-sign stays outside the anchor. List references link to the list
    URL base (or ``list_url_resolver``) with the lowercased ``user/list``.
    With ``suppress_lists`` they are linked as usernames and keep the whole
    ``user/list`` text, both as link text and in the href.

    Args:
        text: Text to link
        options: AutolinkConfig or option mapping; defaults fill unset values
        html_options: Extra attributes for each anchor
        transform: Applied to ``user`` or ``user/list`` before rendering

    Returns:
        Text with usernames and lists linked
    """
    text = _as_text(text)
    config = AutolinkConfig.coerce(options).with_defaults()
    extra_html = html_attrs_for_options(_link_attributes(config, html_options))
    resolve_list: LinkResolver = config.list_url_resolver or BaseUrlResolver(config.list_url_base or "")
    resolve_username: LinkResolver = config.username_url_resolver or BaseUrlResolver(config.username_url_base or "")
    url_class = html_escape(config.url_class)
    list_css = f"{url_class} {html_escape(config.list_class)}"
    username_css = f"{url_class} {html_escape(config.username_class)}"
    linked = 0

    def render(match: EntityMatch) -> str:
        nonlocal linked
        name = match.identifier
        chunk = transform(name) if transform else name
        if match.list_slug and not config.suppress_lists:
            href = resolve_list(name.lower())
            css = list_css
        else:
            href = resolve_username(chunk)
            css = username_css
        linked += 1
        return f'{match.marker}<a class="{css}" href="{href}"{extra_html}>{html_escape(chunk)}</a>'

    result = detect_usernames_or_lists(text, render)
    logger.debug("Linked %d username(s) or list(s)", linked)
    return result


def auto_link_urls_custom(
    text: str | None,
    options: Options = None,
    html_options: Mapping[str, Any] | None = None,
    transform: Transform = None,
) -> str:
    """Wrap http(s) URLs in anchors.

    No defaults are filled in here. Every option that is not a behavioural
    option (``target``, or any unknown key) becomes an attribute of each
    anchor, and ``url_class`` becomes its ``class``. Visible text is the
    ``display_url`` of a matching URL entity, else the URL itself.

    Args:
        text: Text to link
        options: AutolinkConfig or option mapping
        html_options: Extra attributes for each anchor
        transform: Applied to each URL before the href and text are built;
            URL entities are still looked up by the URL as written

    Returns:
        Text with URLs linked
    """
    text = _as_text(text)
    config = AutolinkConfig.coerce(options)
    display_urls = config.display_urls()

    attributes = dict(html_options or {})
    attributes.update(config.as_options())
    if config.url_class:
        attributes["class"] = config.url_class
    extra_html = html_attrs_for_options(_link_attributes(config, attributes))
    resolve: LinkResolver = config.link_url_resolver or EscapedUrlResolver()
    linked = 0

    def render(match: EntityMatch) -> str:
        nonlocal linked
        url = transform(match.value) if transform else match.value
        href = resolve(url)
        display_url = display_urls.get(match.value, url)
        linked += 1
        return f'<a href="{href}"{extra_html}>{html_escape(display_url)}</a>'

    result = detect_urls(text, render)
    logger.debug("Linked %d URL(s)", linked)
    return result


def auto_link(
    text: str | None,
    options: Options = None,
    html_options: Mapping[str, Any] | None = None,
) -> str:
    """Link hashtags, then URLs, then usernames and lists.

    Each pass receives the output of the previous one and the same options.

    Options:
        url_class: class added to every ``<a>``
        list_class / username_class / hashtag_class: per-kind class
        username_url_base / list_url_base / hashtag_url_base: href prefixes;
            the entity text (without marker) is appended
        username_url_resolver / list_url_resolver / hashtag_url_resolver /
            link_url_resolver: callables producing the href instead
        url_entities: records giving a display_url for a URL
        suppress_lists: link ``@user/list`` as a username
        suppress_no_follow: leave out ``rel="nofollow"``
        target: add ``target="name"`` to every ``<a>``

    Args:
        text: Text to link
        options: AutolinkConfig or option mapping
        html_options: Extra attributes for each anchor

    Returns:
        HTML with all entities linked
    """
    config = AutolinkConfig.coerce(options)
    text = auto_link_hashtags(text, config, html_options)
    text = auto_link_urls_custom(text, config, html_options)
    return auto_link_usernames_or_lists(text, config, html_options)


class Autolinker:
    """Reusable autolinker bound to one set of options.

    Usage:
        >>> linker = Autolinker({"target": "_blank"}, {"data-source": "feed"})
        >>> html = linker("Follow @jack")

        >>> # Single passes
        >>> html = linker.hashtags("#python")

    Thread Safety:
        Options are coerced into an immutable config at construction; the
        instance holds no other state and may be shared across threads.

    """

    __slots__ = ("_config", "_html_options")

    def __init__(self, options: Options = None, html_options: Mapping[str, Any] | None = None) -> None:
        self._config = AutolinkConfig.coerce(options)
        self._html_options: Mapping[str, Any] = MappingProxyType(dict(html_options or {}))

    @property
    def config(self) -> AutolinkConfig:
        return self._config

    def __call__(self, text: str | None) -> str:
        return auto_link(text, self._config, self._html_options)

    def hashtags(self, text: str | None, transform: Transform = None) -> str:
        return auto_link_hashtags(text, self._config, self._html_options, transform)

    def urls(self, text: str | None, transform: Transform = None) -> str:
        return auto_link_urls_custom(text, self._config, self._html_options, transform)

    def usernames_or_lists(self, text: str | None, transform: Transform = None) -> str:
        return auto_link_usernames_or_lists(text, self._config, self._html_options, transform)

    def link_many(self, texts: Iterable[str | None]) -> list[str]:
        """Link every text with the same options."""
        return [self(text) for text in texts]


__all__ = [
    "Autolinker",
    "auto_link",
    "auto_link_hashtags",
    "auto_link_urls_custom",
    "auto_link_usernames_or_lists",
]
