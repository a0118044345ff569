"""decimal-time: текущий момент в Decimal Time."""

import json
import logging
from datetime import datetime, timezone

import click
from rich.console import Console

from src.decimal_time.cli.config import ClockConfig
from src.decimal_time.contracts import validate_decimal_time
from src.decimal_time.domain import DecimalTime, from_naive_datetime

logger = logging.getLogger(__name__)

console = Console()


def _local_decimal_time(config: ClockConfig, now_utc: datetime) -> DecimalTime:
    """now_utc в зоне config.offset, по настенному времени."""
    local_now = now_utc.astimezone(config.offset)
    dec_time = from_naive_datetime(local_now.replace(tzinfo=None))
    logger.debug("Local %s -> %r", local_now, dec_time)
    return dec_time


def render_now(config: ClockConfig, now_utc: datetime) -> str:
    """Строка вывода для момента now_utc (aware UTC)."""
    dec_time = _local_decimal_time(config, now_utc)
    return f"{config.label}: {dec_time.format(config.template)}"


@click.command()
@click.option(
    "--offset-hours",
    type=float,
    default=ClockConfig.utc_offset_hours,
    show_default=True,
    help="Fixed UTC offset used for display",
)
@click.option(
    "--template",
    default=ClockConfig.template,
    show_default=True,
    help="Template with %Y, %d and %f placeholders",
)
@click.option("--utc", "use_utc", is_flag=True, help="Ignore the offset and show UTC")
@click.option("--json", "as_json", is_flag=True, help="Print the value as a JSON document")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(offset_hours: float, template: str, use_utc: bool, as_json: bool, verbose: bool):
    """Print the current moment in Decimal Time."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    config = ClockConfig(
        utc_offset_hours=0.0 if use_utc else offset_hours,
        template=template,
    )
    now_utc = datetime.now(timezone.utc)

    if as_json:
        data = _local_decimal_time(config, now_utc).model_dump()
        validate_decimal_time(data)
        click.echo(json.dumps(data))
        return

    console.print(render_now(config, now_utc), markup=False, highlight=False, soft_wrap=True)


def main():
    cli()


if __name__ == "__main__":
    main()
