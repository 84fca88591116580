"""Data models for the dialogs module.

Message templates use explicit positional placeholders (``{0}``,
``{1}``, ``{2:.0f}``). Templates are parsed when constructed so a
malformed template fails at import time instead of producing broken
user-visible text.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from string import Formatter

_FORMATTER = Formatter()


class TemplateError(ValueError):
    """Raised when a message template is malformed or rendered incorrectly."""


def _parse_placeholders(text: str) -> tuple[int, ...]:
    """Return the argument index referenced by each placeholder in ``text``."""
    try:
        parsed = list(_FORMATTER.parse(text))
    except ValueError as e:
        raise TemplateError(f"Malformed template {text!r}: {e}") from e

    indexes = []
    for _literal, field_name, format_spec, _conversion in parsed:
        if field_name is None:
            continue
        if not field_name.isdigit():
            raise TemplateError(
                f"Placeholder {{{field_name}}} in {text!r} must be an explicit "
                "positional index such as {0}"
            )
        if format_spec and "{" in format_spec:
            raise TemplateError(f"Nested placeholders are not supported in {text!r}")
        indexes.append(int(field_name))
    return tuple(indexes)


@dataclass(frozen=True)
class MessageTemplate:
    """A message with positional placeholders.

    Attributes:
        text: Template text, e.g. ``"*{0}* was trying to track you here."``.
        arity: Number of arguments ``render`` expects (derived from ``text``).
    """

    text: str
    arity: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        indexes = _parse_placeholders(self.text)
        arity = max(indexes) + 1 if indexes else 0
        missing = set(range(arity)) - set(indexes)
        if missing:
            raise TemplateError(
                f"Template {self.text!r} skips argument index(es) {sorted(missing)}"
            )
        object.__setattr__(self, "arity", arity)

    def render(self, *args: object) -> str:
        """Substitute ``args`` into the template.

        Args:
            *args: Positional values, one per placeholder index.

        Returns:
            The rendered message.

        Raises:
            TemplateError: If the argument count does not match the arity or
                a value does not fit its format spec.
        """
        if len(args) != self.arity:
            raise TemplateError(
                f"Template expects {self.arity} argument(s), got {len(args)}"
            )
        try:
            return self.text.format(*args)
        except (ValueError, TypeError) as e:
            raise TemplateError(f"Cannot render {self.text!r} with {args!r}: {e}") from e


@dataclass(frozen=True)
class HomeScreenSpec:
    """A dialog shown on the home screen.

    Attributes:
        height: Suggested dialog height in points.
        message: Fixed message text.
    """

    height: int
    message: str


@dataclass(frozen=True)
class BrowsingSpec:
    """A dialog shown after a page load.

    Attributes:
        height: Suggested dialog height in points.
        template: Message template.
        cta: Call-to-action button label.
        arguments: Values substituted into the template; empty until formatted.
    """

    height: int
    template: MessageTemplate
    cta: str
    arguments: tuple[object, ...] = ()

    def __post_init__(self) -> None:
        if self.arguments and len(self.arguments) != self.template.arity:
            raise TemplateError(
                f"Template expects {self.template.arity} argument(s), "
                f"got {len(self.arguments)}"
            )

    @property
    def is_formatted(self) -> bool:
        """Return True if the placeholders have been substituted."""
        return self.template.arity == 0 or bool(self.arguments)

    @property
    def message(self) -> str:
        """Return the message text, rendered if arguments are present."""
        if not self.arguments:
            return self.template.text
        return self.template.render(*self.arguments)

    def format(self, *args: object) -> BrowsingSpec:
        """Return a copy of this spec with ``args`` substituted.

        Height and CTA are carried over unchanged.

        Raises:
            TemplateError: If ``args`` does not fit the template.
        """
        # Render eagerly so a value that does not fit its format spec fails here.
        self.template.render(*args)
        return replace(self, arguments=tuple(args))
