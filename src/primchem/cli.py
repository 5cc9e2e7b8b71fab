"""Command-line entrypoints for primchem."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict

import numpy as np
import typer

from primchem.kinetics import DomainError, three_body_rates, two_body_rates
from primchem.models import THREE_BODY_REACTIONS, TWO_BODY_REACTIONS

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)

UNITS = {"temperature": "K", "two_body": "cm^3 s^-1", "three_body": "cm^6 s^-1"}


@app.callback()
def main(
    log_level: Annotated[
        str, typer.Option(help="Logging level (DEBUG, INFO, WARNING, ...).")
    ] = "WARNING",
) -> None:
    """Primordial H/H2 chemistry rate coefficients."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _evaluate(temperature: Any) -> Dict[str, Any]:
    try:
        two_body = two_body_rates(temperature)
        three_body = three_body_rates(temperature)
    except DomainError as exc:
        raise typer.BadParameter(str(exc)) from exc

    return {
        "two_body": {
            reaction.name: rate.tolist() for reaction, rate in zip(TWO_BODY_REACTIONS, two_body)
        },
        "three_body": {
            reaction.name: rate.tolist()
            for reaction, rate in zip(THREE_BODY_REACTIONS, three_body)
        },
    }


def _emit(payload: Dict[str, Any], output: Path | None) -> None:
    json_output = json.dumps(payload, indent=2)
    typer.echo(json_output)

    if output:
        with open(output, "w") as f:
            f.write(json_output)
        logger.info("Wrote rates to %s", output)


@app.command()
def rates(
    temperature: Annotated[float, typer.Argument(help="Gas temperature (K).")],
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
) -> None:
    """Evaluate every rate coefficient at a single temperature."""
    logger.info("Evaluating rates at T = %g K", temperature)
    payload = {"temperature": temperature, **_evaluate(temperature), "units": UNITS}
    _emit(payload, output)


@app.command()
def table(
    t_min: Annotated[float, typer.Option(help="Lowest temperature (K).")] = 10.0,
    t_max: Annotated[float, typer.Option(help="Highest temperature (K).")] = 1.0e5,
    points: Annotated[int, typer.Option(help="Number of grid points.", min=1)] = 50,
    linear: Annotated[
        bool, typer.Option(help="Use a linear instead of a logarithmic grid.")
    ] = False,
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
) -> None:
    """Tabulate every rate coefficient over a temperature grid."""
    if t_min <= 0.0 or t_max <= 0.0:
        raise typer.BadParameter("Temperatures must be strictly positive.")
    if t_min > t_max:
        raise typer.BadParameter("--t-min must not exceed --t-max.")

    if linear:
        temperatures = np.linspace(t_min, t_max, points)
    else:
        temperatures = np.geomspace(t_min, t_max, points)
    logger.info("Tabulating %d temperatures in [%g, %g] K", points, t_min, t_max)

    payload = {
        "temperature": temperatures.tolist(),
        **_evaluate(temperatures),
        "units": UNITS,
    }
    _emit(payload, output)


@app.command()
def reactions() -> None:
    """List the reactions of the network in output order."""
    for reaction in TWO_BODY_REACTIONS + THREE_BODY_REACTIONS:
        typer.echo(
            f"{reaction.name:<4} {reaction.order}-body  {reaction.equation:<24}"
            f" [{reaction.units}]  {reaction.reference}"
        )
