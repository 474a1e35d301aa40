"""Typed view of a validated me.json document.

These TypedDicts describe the document only after validation has passed;
``ValidationEngine`` hands back the caller's own dict under this type, it
never builds a new object.
"""

from enum import Enum
from typing import Any, Literal, Union

from typing_extensions import NotRequired, TypedDict


class Me3Page(TypedDict):
    """Custom markdown page."""

    slug: str
    title: str
    file: str           # Path to markdown, relative to me.json
    visible: bool       # Show in navigation


class Me3Post(TypedDict):
    """Blog post."""

    slug: str
    title: str
    file: str
    publishedAt: NotRequired[str]   # ISO publish date
    excerpt: NotRequired[str]


class Me3Button(TypedDict):
    """Call-to-action button."""

    text: str
    url: str
    style: NotRequired[Literal["primary", "secondary", "outline"]]
    icon: NotRequired[str]          # Emoji or icon identifier


class Me3FooterLink(TypedDict):
    text: str
    url: str


class Me3Footer(TypedDict, total=False):
    text: str
    link: Me3FooterLink


class Me3IntentSubscribe(TypedDict):
    """Newsletter subscription intent."""

    enabled: bool
    title: NotRequired[str]
    description: NotRequired[str]
    frequency: NotRequired[Literal["daily", "weekly", "monthly", "irregular"]]


class Me3BookingAvailability(TypedDict):
    """Weekly availability for native booking."""

    timezone: str                               # e.g. "America/New_York"
    windows: NotRequired[dict[str, list[str]]]  # weekday → ["HH:MM-HH:MM", ...]


class Me3BookingPricing(TypedDict):
    """Pay-what-you-want pricing. Amount fields are only meaningful when enabled."""

    enabled: bool
    suggestedAmount: NotRequired[Union[int, float]]
    currency: NotRequired[Literal["USD", "GBP", "EUR"]]
    minimumAmount: NotRequired[Literal[5]]
    allowFree: NotRequired[bool]


class Me3IntentBook(TypedDict):
    """Meeting booking intent: external ``url`` and/or native ``availability``."""

    enabled: bool
    title: NotRequired[str]
    description: NotRequired[str]
    duration: NotRequired[Union[int, float]]    # Minutes
    provider: NotRequired[str]                  # e.g. "cal.com"
    url: NotRequired[str]
    availability: NotRequired[Me3BookingAvailability]
    pricing: NotRequired[Me3BookingPricing]


class Me3Intents(TypedDict, total=False):
    """Machine-readable actions visitors and agents can take."""

    subscribe: Me3IntentSubscribe
    book: Me3IntentBook


class Me3Profile(TypedDict):
    """Root of a me.json document."""

    version: str
    name: str
    handle: NotRequired[str]
    location: NotRequired[str]
    bio: NotRequired[str]
    avatar: NotRequired[str]
    banner: NotRequired[str]
    links: NotRequired[dict[str, str]]      # Open key set: github, twitter, ...
    buttons: NotRequired[list[Me3Button]]
    pages: NotRequired[list[Me3Page]]
    posts: NotRequired[list[Me3Post]]
    footer: NotRequired[Union[Me3Footer, Literal[False]]]
    intents: NotRequired[Me3Intents]


# ── Footer variant ──

class FooterState(str, Enum):
    """The footer field folds three valid states and one invalid one into a single key."""

    DEFAULT = "default"      # Absent: renderer decides
    HIDDEN = "hidden"        # Literal false: footer suppressed
    CUSTOM = "custom"        # Object with optional text/link
    MALFORMED = "malformed"  # Anything else


_ABSENT = object()


def classify_footer(value: Any = _ABSENT) -> FooterState:
    """Tag a raw footer value. Call with no argument when the key is absent."""
    if value is _ABSENT:
        return FooterState.DEFAULT
    # `false` must be recognised before any object/type branch
    if value is False:
        return FooterState.HIDDEN
    if isinstance(value, dict):
        return FooterState.CUSTOM
    return FooterState.MALFORMED


def footer_state(profile: Me3Profile) -> FooterState:
    """Footer state of a validated profile."""
    if "footer" not in profile:
        return classify_footer()
    return classify_footer(profile["footer"])
