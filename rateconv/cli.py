#!/usr/bin/env python3
"""rateconv CLI - convert data rates between size and time units."""
from typing import Optional

import typer
from rich.console import Console

from rateconv.cli_support import find_config, handle_cli_error, print_result, show_units
from rateconv.core.config import load_config
from rateconv.core.converter import convert as convert_rate
from rateconv.core.formatter import describe_conversion, format_rate
from rateconv.core.logger import (
    close_file_logging,
    get_logger,
    set_log_level,
    setup_file_logging,
)
from rateconv.core.parser import parse_rate, parse_unit_spec
from rateconv.models import InvalidOption, RateConvError

app = typer.Typer(
    name="rateconv",
    help="Converts data rates e.g. `56 kb/s` between different size and time units",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


def _list_units_callback(value: bool) -> None:
    if not value:
        return
    show_units(console)
    raise typer.Exit()


@app.command()
def convert(
    input_rate: str = typer.Argument(
        ..., metavar="INPUT_RATE", help="The data rate to convert (e.g. '64 kb/s')"
    ),
    output_rate: Optional[str] = typer.Argument(
        None, metavar="OUTPUT_RATE", help="The desired output units (e.g. 'mb/hr') [default: kB/s]"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    decimal_places: Optional[str] = typer.Option(
        None, "--decimal-places", "--decimals", "-d", metavar="N",
        help="The number of decimal places in the output [default: 2]",
    ),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Settings file path"),
    debug: bool = typer.Option(False, "--debug", help="Log parsing and conversion details"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
    list_units: bool = typer.Option(
        False, "--list-units", callback=_list_units_callback, is_eager=True,
        help="Show supported units and exit",
    ),
) -> None:
    """Convert a data rate such as `100 kb/s` into other units such as `mb/hr`.

    A lower-case b means bits and an upper-case B means bytes: `kb/s` is
    kilobits per second, `kB/s` is kilobytes per second.
    """
    set_log_level(debug)

    try:
        settings = load_config(find_config(config)).with_overrides(
            decimal_places=decimal_places,
            verbose=verbose or None,
            log_file=log_file,
        )
        if settings.log_file:
            try:
                setup_file_logging(settings.log_file, verbose=debug)
            except OSError as e:
                raise InvalidOption(
                    f"Cannot write log file {settings.log_file}: {e}",
                    token=settings.log_file,
                    source="--log-file",
                ) from e

        source = parse_rate(input_rate, source="input rate")
        target = parse_unit_spec(
            output_rate if output_rate is not None else settings.output_rate,
            source="output rate",
            default_time_unit=source.time_unit,
        )
        result = convert_rate(source, target)
        logger.info(f"{input_rate!r} -> {format_rate(result, settings.decimal_places)}")
    except (RateConvError, FileNotFoundError) as e:
        logger.info(f"Conversion failed: {e}")
        handle_cli_error(e, err_console, verbose=debug)
    finally:
        close_file_logging()

    if settings.verbose:
        print_result(console, describe_conversion(source, result, settings.decimal_places))
    print_result(console, format_rate(result, settings.decimal_places))


if __name__ == "__main__":
    app()
