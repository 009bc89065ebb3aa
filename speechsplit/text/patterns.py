"""Pattern builder for trigger-parametrized matchers.

Responsibilities:
- Describe positional templates as data (target fragment plus conditions).
- Escape literal triggers and compile the alternation of rendered templates.

Key types:
- `Condition`: tagged positional condition kind.
- `PositionalCondition`: one condition bound to a pattern fragment.
- `PatternTemplate`: target fragment plus ordered conditions.
- `PatternBuilder`: compiles triggers and a template into one `re.Pattern`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
import re


TRIGGER_PLACEHOLDER = "{trigger}"
ANY_CHARACTER = "."


class Condition(str, Enum):
    """Positional relation between a match target and a context fragment."""

    PRECEDED_BY = "preceded_by"
    FOLLOWED_BY = "followed_by"
    NOT_PRECEDED_BY = "not_preceded_by"
    NOT_FOLLOWED_BY = "not_followed_by"

    @property
    def is_lookbehind(self) -> bool:
        """Return whether the condition inspects text before the target."""

        return self in (Condition.PRECEDED_BY, Condition.NOT_PRECEDED_BY)


_CONDITION_SYNTAX = {
    Condition.PRECEDED_BY: "(?<={})",
    Condition.FOLLOWED_BY: "(?={})",
    Condition.NOT_PRECEDED_BY: "(?<!{})",
    Condition.NOT_FOLLOWED_BY: "(?!{})",
}


@dataclass(frozen=True, slots=True)
class PositionalCondition:
    """A context requirement around the match target.

    Attributes:
        kind: Relation between target and context.
        context: Pattern fragment for the context; `{trigger}` is replaced by
            the escaped trigger literal.
    """

    kind: Condition
    context: str = TRIGGER_PLACEHOLDER

    def render(self, escaped_trigger: str) -> str:
        """Render the condition as a zero-width assertion."""

        fragment = self.context.replace(TRIGGER_PLACEHOLDER, escaped_trigger)
        return _CONDITION_SYNTAX[self.kind].format(fragment)


@dataclass(frozen=True, slots=True)
class PatternTemplate:
    """Positional template applied to each escaped trigger.

    Attributes:
        target: Pattern fragment actually consumed by a match. `{trigger}` is
            replaced by the escaped trigger; an empty target matches a position.
        conditions: Assertions placed before (lookbehind kinds) or after
            (lookahead kinds) the target.
    """

    target: str = TRIGGER_PLACEHOLDER
    conditions: tuple[PositionalCondition, ...] = ()

    def render(self, escaped_trigger: str) -> str:
        """Render the template for one escaped trigger."""

        before = "".join(
            condition.render(escaped_trigger)
            for condition in self.conditions
            if condition.kind.is_lookbehind
        )
        after = "".join(
            condition.render(escaped_trigger)
            for condition in self.conditions
            if not condition.kind.is_lookbehind
        )
        target = self.target.replace(TRIGGER_PLACEHOLDER, escaped_trigger)
        return f"{before}{target}{after}"


LITERAL = PatternTemplate()


def as_triggers(triggers: str | Iterable[str]) -> tuple[str, ...]:
    """Normalize one trigger string or an iterable of triggers into a tuple.

    A plain string is a single trigger; pass `tuple(text)` to use each
    character as its own trigger.
    """

    if isinstance(triggers, str):
        return (triggers,)
    return tuple(triggers)


class PatternBuilder:
    """Build one compiled matcher from literal triggers and a template.

    Each trigger is escaped with `re.escape`, rendered through the template and
    joined with `|` so the resulting matcher matches wherever at least one
    trigger satisfies the template.
    """

    def __init__(
        self,
        triggers: str | Iterable[str],
        template: PatternTemplate = LITERAL,
        flags: int = 0,
    ) -> None:
        """Initialize and compile the matcher.

        Args:
            triggers: Literal trigger string(s), matched verbatim.
            template: Positional template applied to each escaped trigger.
            flags: `re` flags used to compile the alternation.

        Raises:
            ValueError: If no trigger is provided or a trigger is empty.
        """

        self.triggers = as_triggers(triggers)
        if not self.triggers:
            raise ValueError("Pattern builder requires at least one trigger.")
        if any(not trigger for trigger in self.triggers):
            raise ValueError("Pattern builder triggers must be non-empty strings.")
        self.template = template
        self.flags = flags
        self.regex = re.compile(self.pattern, flags)

    @property
    def pattern(self) -> str:
        """Return the uncompiled alternation pattern."""

        return "|".join(self.template.render(re.escape(trigger)) for trigger in self.triggers)
