"""Command-line entrypoints for SpThermo."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict

import typer

from spthermo.exceptions import ConfigurationError, SpThermoError
from spthermo.models import CoefficientRecord
from spthermo.thermo import GeneralSpeciesThermo, UniformPressureSpeciesThermo

app = typer.Typer(add_completion=False)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Evaluate species reference-state thermodynamic properties."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_phase(phase_file: Path) -> GeneralSpeciesThermo:
    with open(phase_file, "r") as f:
        data = json.load(f)

    entries = data.get("species", [])
    if not entries:
        raise ConfigurationError(f"{phase_file} does not define any species")
    manager_cls = (
        UniformPressureSpeciesThermo if data.get("uniform_ref_pressure", False) else GeneralSpeciesThermo
    )
    manager = manager_cls(len(entries))
    for index, entry in enumerate(entries):
        manager.install_record(CoefficientRecord.from_mapping(index, entry))
    return manager


def _species_index(manager: GeneralSpeciesThermo, name: str) -> int:
    for k in range(manager.species_count):
        if manager.species_name(k) == name:
            return k
    raise typer.BadParameter(f"Unknown species '{name}'", param_hint="--species")


def _emit(payload: Dict[str, Any], output: Path | None) -> None:
    json_output = json.dumps(payload, indent=2)
    typer.echo(json_output)
    if output:
        with open(output, "w") as f:
            f.write(json_output)


@app.command()
def evaluate(
    phase_file: Annotated[Path, typer.Argument(help="Path to JSON phase definition.")],
    temperature: Annotated[float, typer.Option("--temperature", "-T", help="Temperature (K).")],
    species: Annotated[
        str | None, typer.Option(help="Only evaluate this species.")
    ] = None,
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
) -> None:
    """Print cp/R, h/RT and s/R of a phase's species at one temperature."""
    if temperature <= 0.0:
        raise typer.BadParameter("Temperature must be positive", param_hint="--temperature")
    try:
        manager = _load_phase(phase_file)
        n = manager.species_count
        cp_R, h_RT, s_R = [0.0] * n, [0.0] * n, [0.0] * n
        if species is None:
            indices = list(range(n))
            manager.update(temperature, cp_R, h_RT, s_R)
        else:
            k = _species_index(manager, species)
            indices = [k]
            manager.update_one(k, temperature, cp_R, h_RT, s_R)
    except SpThermoError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if species is None:
        t_min, t_max = manager.min_temp(), manager.max_temp()
    else:
        t_min, t_max = manager.min_temp(indices[0]), manager.max_temp(indices[0])

    payload = {
        "temperature": temperature,
        "min_temp": t_min,
        "max_temp": t_max,
        "extrapolated": not (t_min <= temperature <= t_max),
        "species": {
            manager.species_name(k): {
                "cp_R": float(cp_R[k]),
                "h_RT": float(h_RT[k]),
                "s_R": float(s_R[k]),
            }
            for k in indices
        },
    }
    _emit(payload, output)


@app.command()
def report(
    phase_file: Annotated[Path, typer.Argument(help="Path to JSON phase definition.")],
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
) -> None:
    """Print the installed parameters of every species in a phase."""
    try:
        manager = _load_phase(phase_file)
    except SpThermoError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    payload = {"species": []}
    for k in range(manager.species_count):
        params = manager.report_params(k)
        payload["species"].append(
            {
                "name": manager.species_name(k),
                "index": k,
                "family": params.family.name,
                "min_temp": params.min_temp,
                "max_temp": params.max_temp,
                "ref_pressure": params.ref_pressure,
                "coefficients": params.coefficients.tolist(),
            }
        )
    _emit(payload, output)
