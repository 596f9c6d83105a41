"""
Command-line interface for FitFlow.

This module provides CLI commands to compute a fitness trend from a JSON
export of synced activities and a JSON file of athlete settings.
"""

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

import click
from pydantic import ValidationError

from fitflow.analytics.interface import AnalyticsError, HeartRateImpulseMode
from fitflow.config import get_settings
from fitflow.services.fitness_service import FitnessTrendService
from fitflow.storage.interface import JsonFileActivitySource
from fitflow.storage.model import FitnessUserSettings
from fitflow.utils import LoggingConfig


def _load_user_settings(path: str) -> FitnessUserSettings:
    try:
        return FitnessUserSettings.model_validate_json(Path(path).read_text(encoding="utf-8"))
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="--settings")


def _build_service(activities: str, today: Optional[datetime]) -> FitnessTrendService:
    clock = (lambda: today) if today else None
    return FitnessTrendService(JsonFileActivitySource(activities), clock=clock)


def _resolve_options(mode: Optional[str], power: Optional[bool], swim: Optional[bool],
                     skip: Tuple[str, ...]):
    settings = get_settings()
    return (
        HeartRateImpulseMode(mode) if mode else settings.heart_rate_impulse_mode,
        settings.power_meter_enable if power is None else power,
        settings.swim_enable if swim is None else swim,
        list(skip) if skip else list(settings.skip_activity_types),
    )


def trend_options(func):
    """Options shared by the trend computing commands"""
    options = [
        click.argument("activities", type=click.Path(exists=True, dir_okay=False)),
        click.option("--settings", "-s", "settings_path", required=True,
                     type=click.Path(exists=True, dir_okay=False), help="Athlete settings JSON file"),
        click.option("--mode", "-m", type=click.Choice([m.value for m in HeartRateImpulseMode]),
                     default=None, help="Heart rate impulse mode"),
        click.option("--power/--no-power", default=None, help="Use power stress score on rides"),
        click.option("--swim/--no-swim", default=None, help="Use swim stress score on swims"),
        click.option("--skip", multiple=True, help="Activity type to skip (repeatable)"),
        click.option("--today", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
                     help="Override today's date (YYYY-MM-DD)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool) -> None:
    """FitFlow command-line interface."""
    LoggingConfig.set_level("DEBUG" if debug else get_settings().log_level)


@cli.command()
@trend_options
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None,
              help="Write the trend to this file instead of stdout")
def trend(activities: str, settings_path: str, mode: Optional[str], power: Optional[bool],
          swim: Optional[bool], skip: Tuple[str, ...], today: Optional[datetime],
          output: Optional[str]) -> None:
    """Compute the day by day fitness trend."""
    user_settings = _load_user_settings(settings_path)
    service = _build_service(activities, today)

    try:
        result = service.analyze(user_settings, *_resolve_options(mode, power, swim, skip))
    except AnalyticsError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    payload = json.dumps(result.to_dict(), indent=2)
    if output:
        Path(output).write_text(payload, encoding="utf-8")
        click.echo(f"✅ Fitness trend written to {output}")
    else:
        click.echo(payload)


@cli.command()
@trend_options
def summary(activities: str, settings_path: str, mode: Optional[str], power: Optional[bool],
            swim: Optional[bool], skip: Tuple[str, ...], today: Optional[datetime]) -> None:
    """Print today's fitness, fatigue and form."""
    user_settings = _load_user_settings(settings_path)
    service = _build_service(activities, today)

    try:
        fitness_trend = service.compute_trend(user_settings, *_resolve_options(mode, power, swim, skip))
    except AnalyticsError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    state = service.summarize(fitness_trend)
    if not state['total_days']:
        click.echo("❌ No activity up to today, nothing to summarize", err=True)
        sys.exit(1)

    click.echo(f"📅 {state['date']}")
    click.echo(f"  • Fitness (CTL): {state['ctl']}")
    click.echo(f"  • Fatigue (ATL): {state['atl']}")
    click.echo(f"  • Form (TSB):    {state['tsb']} ({state['form']})")
    click.echo(f"  • Peak fitness:  {state['peak_ctl']} on {state['peak_ctl_date']}")
    click.echo(f"  • Active days:   {state['active_days']} / {state['total_days']}")


if __name__ == "__main__":
    cli()
