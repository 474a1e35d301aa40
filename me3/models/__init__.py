"""Typed views and API payloads."""

from me3.models.profile import (
    FooterState,
    Me3Profile,
    classify_footer,
    footer_state,
)

__all__ = ["FooterState", "Me3Profile", "classify_footer", "footer_state"]
