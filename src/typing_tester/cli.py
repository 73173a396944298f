from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import typer
import yaml

from .capture import capture_typed_input
from .config import ConfigurationError, TypingTestConfig, load_config, validate_config
from .measures import MeasureUnit, compute_rate, format_rate
from .models import CharacterMark, Passage
from .pipeline import PassageOutcome, build_rng, load_and_generate
from .scoring import score_input

app = typer.Typer(help="Generate a typing test.", no_args_is_help=True)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log dictionary and selection details."
    ),
) -> None:
    """Typing test generator and scorer."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def run(
    min_length: int | None = typer.Option(
        None,
        "--min",
        "--min-length",
        "-u",
        help="Minimum word length, '0' to ignore. [default: 2]",
    ),
    max_length: int | None = typer.Option(
        None,
        "--max",
        "--max-length",
        "-l",
        help="Maximum word length, '0' to ignore. [default: 0]",
    ),
    amount: int | None = typer.Option(
        None,
        "--amount",
        "--words-amount",
        "-a",
        help="Number of words in the test. [default: 25]",
    ),
    top: int | None = typer.Option(
        None,
        "--top",
        "-t",
        help=(
            "Only pick from the n most frequent words (your file can contain 20k "
            "words but you only want the 200 most frequent). [default: 200]"
        ),
    ),
    dictionary: Path | None = typer.Option(
        None,
        "--dictionary",
        "-d",
        help="Newline separated word list, most frequent first. [default: bundled list]",
    ),
    dictionary_size: int | None = typer.Option(
        None,
        "--dictionary-size",
        "-s",
        help="Expected number of words in the dictionary file. [default: 20000]",
    ),
    measure_units: MeasureUnit | None = typer.Option(
        None, "--measure-units", "-m", help="Units of measure. [default: wpm]"
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed the word sampler for a reproducible test."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Show a passage, time the typed line and report errors and speed."""
    cfg = _resolve_config(
        config,
        min_length,
        max_length,
        amount,
        top,
        dictionary,
        dictionary_size,
        measure_units,
        seed,
    )
    passage = _require_passage(load_and_generate(cfg, build_rng(cfg.seed)), cfg)
    if passage.is_empty:
        return

    target = passage.text
    typer.echo(target)

    captured = capture_typed_input(_read_first_keystroke, sys.stdin.readline)
    score = score_input(target, captured, on_mark=_echo_mark)
    rate = compute_rate(score, len(captured.typed), cfg.measure_units)

    typer.echo(f"\nErrors: {score.error_count}")
    typer.secho(f"You were typing: {score.elapsed_ms} ms", fg=typer.colors.YELLOW)
    typer.echo(f"Speed: {format_rate(rate, cfg.measure_units)}")


@app.command()
def generate(
    min_length: int | None = typer.Option(
        None, "--min", "--min-length", "-u", help="Minimum word length, '0' to ignore."
    ),
    max_length: int | None = typer.Option(
        None, "--max", "--max-length", "-l", help="Maximum word length, '0' to ignore."
    ),
    amount: int | None = typer.Option(
        None, "--amount", "--words-amount", "-a", help="Number of words in the test."
    ),
    top: int | None = typer.Option(
        None, "--top", "-t", help="Only pick from the n most frequent words."
    ),
    dictionary: Path | None = typer.Option(
        None, "--dictionary", "-d", help="Newline separated word list."
    ),
    dictionary_size: int | None = typer.Option(
        None, "--dictionary-size", "-s", help="Expected number of words."
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed the word sampler for a reproducible test."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print a passage without starting a timed test."""
    cfg = _resolve_config(
        config,
        min_length,
        max_length,
        amount,
        top,
        dictionary,
        dictionary_size,
        None,
        seed,
    )
    passage = _require_passage(load_and_generate(cfg, build_rng(cfg.seed)), cfg)
    if not passage.is_empty:
        typer.echo(passage.text)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = TypingTestConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    """Console entry point; every usage or configuration failure exits with 1."""
    try:
        result = app(standalone_mode=False)
    except click.UsageError as exc:
        exc.show()
        sys.exit(1)
    except click.ClickException as exc:
        exc.show()
        sys.exit(exc.exit_code)
    except click.Abort:
        typer.secho("Aborted!", fg=typer.colors.RED, err=True)
        sys.exit(1)
    sys.exit(result if isinstance(result, int) else 0)


def _resolve_config(
    config_path: Path | None,
    min_length: int | None,
    max_length: int | None,
    amount: int | None,
    top: int | None,
    dictionary: Path | None,
    dictionary_size: int | None,
    measure_units: MeasureUnit | None,
    seed: int | None,
) -> TypingTestConfig:
    """Load the YAML config, apply CLI overrides and validate the result."""
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        typer.secho(f"Invalid --config file: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    _apply_selection_overrides(cfg, min_length, max_length, amount, top)
    if dictionary is not None:
        # Config stores string paths so cast Path objects accordingly.
        cfg.dictionary = str(dictionary)
    if dictionary_size is not None:
        cfg.dictionary_size = dictionary_size
    if measure_units is not None:
        cfg.measure_units = measure_units.value
    if seed is not None:
        cfg.seed = seed
    try:
        validate_config(cfg)
    except ConfigurationError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    return cfg


def _apply_selection_overrides(
    config: TypingTestConfig,
    min_length: int | None,
    max_length: int | None,
    amount: int | None,
    top: int | None,
) -> None:
    """Apply CLI overrides to the word selection fields when provided."""
    if min_length is not None:
        config.min_length = min_length
    if max_length is not None:
        config.max_length = max_length
    if amount is not None:
        config.amount = amount
    if top is not None:
        config.top = top


def _require_passage(outcome: PassageOutcome, config: TypingTestConfig) -> Passage:
    """Stop the run when the dictionary is unreadable; report an empty passage."""
    if outcome.unavailable is not None:
        typer.secho(
            f'Error occurred: Could not read file "{outcome.unavailable.path}" '
            f"({outcome.unavailable.reason})",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    passage = outcome.passage or Passage(words=(), positions=())
    if passage.is_empty:
        typer.secho(
            f"No words among the top {config.top} match the length filter; "
            "nothing to type.",
            fg=typer.colors.YELLOW,
        )
    return passage


def _read_first_keystroke() -> str:
    """Read the first keystroke unbuffered when attached to a terminal."""
    if not sys.stdin.isatty():
        return sys.stdin.read(1)
    try:
        return click.getchar(echo=True)
    except EOFError:
        return ""


def _echo_mark(mark: CharacterMark) -> None:
    if mark.correct:
        typer.echo(mark.typed, nl=False)
    else:
        typer.secho(mark.typed, fg=typer.colors.RED, nl=False)


if __name__ == "__main__":
    main()
