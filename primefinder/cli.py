"""CLI entry point for primefinder."""

from __future__ import annotations

import logging

import click
import orjson
from rich.console import Console
from rich.table import Table

from primefinder.finder import InvalidArgument, estimate_upper_bound, find_with_attempts, nth_prime
from primefinder.sieve import sieve_of_eratosthenes

console = Console()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_TABLE_COUNT = 10
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

log = logging.getLogger(__name__)


def _index_error(exc: InvalidArgument, param_hint: str) -> click.BadParameter:
    return click.BadParameter(str(exc), param_hint=param_hint)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="PRIMEFINDER_LOG_LEVEL",
    help="Logging verbosity (also read from PRIMEFINDER_LOG_LEVEL).",
)
@click.version_option(package_name="primefinder")
def cli(log_level: str):
    """Compute prime numbers with a Sieve of Eratosthenes."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=True,
    )


# Negative indices would otherwise be parsed as options.
@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("indices", nargs=-1, required=True, type=int)
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON object mapping index to prime.")
def nth(indices: tuple[int, ...], as_json: bool):
    """Print the N-th prime (0-indexed) for each INDEX."""
    results: list[tuple[int, int]] = []
    for n in indices:
        try:
            prime = nth_prime(n)
        except InvalidArgument as exc:
            raise _index_error(exc, f"'{n}'") from exc
        log.info("Prime at index %d is %d", n, prime)
        results.append((n, prime))

    if as_json:
        payload = {str(n): prime for n, prime in results}
        click.echo(orjson.dumps(payload).decode())
        return

    for n, prime in results:
        if len(results) == 1:
            console.print(prime)
        else:
            console.print(f"{n}: [bold]{prime}[/bold]")


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("limit", type=int)
@click.option("--count", "count_only", is_flag=True, help="Only print how many primes there are.")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of plain text.")
def sieve(limit: int, count_only: bool, as_json: bool):
    """Print every prime less than or equal to LIMIT."""
    primes = sieve_of_eratosthenes(limit)
    log.info("Sieved up to %d: %d primes", limit, len(primes))

    if as_json:
        payload = {"limit": limit, "count": len(primes)}
        if not count_only:
            payload["primes"] = primes
        click.echo(orjson.dumps(payload).decode())
        return

    if count_only:
        console.print(len(primes))
    elif primes:
        console.print(" ".join(str(p) for p in primes), soft_wrap=True)


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("n", type=int)
def estimate(n: int):
    """Show the seed sieve bound for index N and how many attempts it took."""
    try:
        bound = estimate_upper_bound(n)
    except InvalidArgument as exc:
        raise _index_error(exc, "'N'") from exc

    primes, attempts = find_with_attempts(n)
    prime = primes[n]

    summary = Table(title=f"Index {n}", show_header=False)
    summary.add_column("Metric", style="bold")
    summary.add_column("Value", justify="right")
    summary.add_row("Seed bound", f"{bound:,}")
    summary.add_row("Prime", f"{prime:,}")
    summary.add_row("Sieve attempts", str(attempts))
    summary.add_row("Bound headroom", f"{bound - prime:,}" if bound >= prime else "[red]too small[/red]")
    console.print(summary)


@cli.command()
@click.option("--start", type=click.IntRange(min=0), default=0, show_default=True, help="First ordinal.")
@click.option(
    "--count",
    type=click.IntRange(min=1),
    default=DEFAULT_TABLE_COUNT,
    show_default=True,
    help="Number of rows.",
)
def table(start: int, count: int):
    """Render a table of ordinals and their primes."""
    last = start + count - 1
    primes, _ = find_with_attempts(last)

    out = Table(title="Primes", show_header=True)
    out.add_column("Ordinal", justify="right", style="bold")
    out.add_column("Prime", justify="right")
    for ordinal in range(start, last + 1):
        out.add_row(str(ordinal), str(primes[ordinal]))
    console.print(out)


def main():
    cli(prog_name="primefinder")


if __name__ == "__main__":
    main()
