from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LoweringOptions:
    """Switches that change how definitions are lowered.

    ``strict_characteristics`` raises :class:`~tripleForge.errors.LoweringError`
    for object-only characteristics set on a datatype or annotation property
    instead of dropping them.
    """

    strict_characteristics: bool = False


DEFAULT_OPTIONS = LoweringOptions()

__all__ = ["LoweringOptions", "DEFAULT_OPTIONS"]
