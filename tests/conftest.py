import copy

import pytest
import structlog

from me3.validators.engine import ValidationEngine

FULL_PROFILE = {
    "version": "0.1",
    "name": "Jane Doe",
    "handle": "jane_doe-42",
    "location": "Berlin, Germany",
    "bio": "Builds small tools for the open web.",
    "avatar": "/avatar.png",
    "banner": "https://example.com/banner.jpg",
    "links": {
        "github": "https://github.com/janedoe",
        "website": "https://jane.dev",
        "mastodon": "https://hachyderm.io/@jane",
    },
    "buttons": [
        {"text": "Book a call", "url": "https://cal.com/jane", "style": "primary", "icon": "📅"},
        {"text": "Newsletter", "url": "http://jane.dev/news"},
    ],
    "pages": [
        {"slug": "about", "title": "About", "file": "about.md", "visible": True},
        {"slug": "uses", "title": "Uses", "file": "pages/uses.md", "visible": False},
    ],
    "posts": [
        {
            "slug": "hello-world",
            "title": "Hello, world",
            "file": "posts/hello-world.md",
            "publishedAt": "2024-03-01",
            "excerpt": "Why I moved my site into a single file.",
        },
        {"slug": "draft", "title": "Draft", "file": "posts/draft.md"},
    ],
    "footer": {
        "text": "Built by Jane",
        "link": {"text": "Source", "url": "https://github.com/janedoe/site"},
    },
    "intents": {
        "subscribe": {
            "enabled": True,
            "title": "AI Weekly",
            "description": "One email a week about practical AI.",
            "frequency": "weekly",
        },
        "book": {
            "enabled": True,
            "title": "30-min Consultation",
            "description": "Talk through your project.",
            "duration": 30,
            "provider": "cal.com",
            "url": "https://cal.com/jane/30min",
            "availability": {
                "timezone": "America/New_York",
                "windows": {
                    "monday": ["09:00-12:00", "13:00-17:00"],
                    "friday": [],
                },
            },
            "pricing": {
                "enabled": True,
                "suggestedAmount": 50,
                "currency": "USD",
                "minimumAmount": 5,
                "allowFree": False,
            },
        },
    },
}


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration a test (e.g. the CLI) installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def engine():
    return ValidationEngine()


@pytest.fixture
def full_profile():
    """A document exercising every field of the protocol."""
    return copy.deepcopy(FULL_PROFILE)


@pytest.fixture
def minimal_profile():
    return {"version": "0.1", "name": "Jane Doe"}


@pytest.fixture
def book_profile():
    """Build a minimal profile around a given book intent."""

    def _build(book):
        return {"version": "0.1", "name": "Jane", "intents": {"book": book}}

    return _build
