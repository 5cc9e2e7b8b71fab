"""Data structures describing the reactions of the network."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Reaction:
    name: str
    equation: str
    order: int
    reference: str

    @property
    def units(self) -> str:
        return "cm^3 s^-1" if self.order == 2 else "cm^6 s^-1"


# Positions match the slots returned by ``two_body_rates``.
TWO_BODY_REACTIONS = (
    Reaction("k1", "H+ + e- -> H + hv", 2, "Draine (2011), case B"),
    Reaction("k2", "H + e- -> H- + hv", 2, "Galli & Palla (1998); Glover (2015)"),
    Reaction("k3", "H + H- -> H2 + e-", 2, "Kreckel et al. (2010); Smith et al. (2017)"),
    Reaction("k4", "H- + H+ -> H + H", 2, "Glover et al. (2010); Glover (2015)"),
    Reaction("k5", "H- + e- -> H + 2e-", 2, "Glover et al. (2010)"),
)

# Positions match the slots returned by ``three_body_rates``.
THREE_BODY_REACTIONS = (
    Reaction("k31", "H + H + H -> H2 + H", 3, "Forrey (2013); Smith et al. (2017)"),
    Reaction("k32", "H + H + H2 -> H2 + H2", 3, "Glover et al. (2010); Smith et al. (2017)"),
)
