"""One layout per known template id."""

from . import cahiers_mint, sido_orange, sido_vrilles

__all__ = ["cahiers_mint", "sido_orange", "sido_vrilles"]
