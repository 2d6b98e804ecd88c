"""Error taxonomy for part generation.

All errors derive from ValueError so that pydantic validators can raise
them directly and callers can catch a single base class.
"""


class BotPartsError(ValueError):
    """Base class for all part generation errors."""


class InvalidGeometry(BotPartsError):
    """A derived dimension would produce a degenerate primitive."""


class UnsupportedFastener(BotPartsError):
    """Fastener class selector does not match any known class."""


class UnsupportedShaftKind(BotPartsError):
    """Shaft coupling selector does not match any known kind."""


class InvalidWheelSpec(BotPartsError):
    """O-ring or stretch parameters violate the wheel ordering invariants."""


class KernelError(BotPartsError):
    """The geometry kernel bridge cannot build a node."""
