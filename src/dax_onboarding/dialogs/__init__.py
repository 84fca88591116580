"""Onboarding dialogs - message templates and canonical specs."""

from dax_onboarding.dialogs.models import (
    BrowsingSpec,
    HomeScreenSpec,
    MessageTemplate,
    TemplateError,
)
from dax_onboarding.dialogs.specs import BrowsingSpecs, HomeScreenSpecs

__all__ = [
    "BrowsingSpec",
    "BrowsingSpecs",
    "HomeScreenSpec",
    "HomeScreenSpecs",
    "MessageTemplate",
    "TemplateError",
]
