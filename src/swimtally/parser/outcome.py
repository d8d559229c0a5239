"""Result type shared by the line rules."""

from pydantic import BaseModel, ConfigDict

from swimtally.models.session import Contribution


class LineOutcome(BaseModel):
    """What a rule made of a line.

    A rule returns None when the line is not its shape. An outcome with a
    `reason` and no contributions means the rule recognized the line but the
    notation is unsupported, and the line must be reported as unparsed.
    """

    model_config = ConfigDict(frozen=True)

    rule: str
    contributions: tuple[Contribution, ...] = ()
    warning: str | None = None
    reason: str | None = None

    @property
    def parsed(self) -> bool:
        return bool(self.contributions)

    @classmethod
    def unsupported(cls, rule: str, reason: str) -> "LineOutcome":
        return cls(rule=rule, reason=reason)


def join_warnings(*warnings: str | None) -> str | None:
    """Combine optional warning messages into one, or None."""
    present = [w for w in warnings if w]
    return "; ".join(present) if present else None
