"""primchem core package."""

from primchem.kinetics import DomainError, rates_by_name, three_body_rates, two_body_rates
from primchem.models import THREE_BODY_REACTIONS, TWO_BODY_REACTIONS, Reaction

__all__ = [
    "DomainError",
    "rates_by_name",
    "three_body_rates",
    "two_body_rates",
    "Reaction",
    "THREE_BODY_REACTIONS",
    "TWO_BODY_REACTIONS",
]
