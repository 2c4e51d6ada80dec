"""
CLI interface for Passforge password generator.
"""

import logging
import sys
import time
from typing import List

import click

from . import clipboard
from .exceptions import ClipboardError, InvalidOptionsError
from .generator import CLASS_ORDER, GenerationOptions, class_alphabet, describe_options, generate_passwords
from .review import review_passwords
from .utils.strength import estimate_strength
from .utils.validation import MAX_COUNT, MAX_LENGTH, MIN_COUNT, MIN_LENGTH


def _copy_passwords(passwords: List[str], clear_after: int) -> None:
    """Copy passwords to the clipboard, reporting failures without aborting."""
    try:
        clear_thread = clipboard.copy_all(passwords, clear_after=clear_after)
    except ClipboardError as e:
        click.echo(f"Error: {e}", err=True)
        return

    what = "Password" if len(passwords) == 1 else f"All {len(passwords)} passwords"
    click.echo(f"✅ {what} copied to clipboard.", err=True)

    if clear_thread is not None:
        click.echo(f"Clearing clipboard in {clear_after} seconds (Ctrl-C to keep it)...", err=True)
        try:
            clear_thread.join()
        except KeyboardInterrupt:
            click.echo("Clipboard kept.", err=True)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
def cli(verbose: bool) -> None:
    """Passforge - generate random passwords from selected character classes."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.option("--length", "-l", default=16, show_default=True,
              type=click.IntRange(MIN_LENGTH, MAX_LENGTH), help="Password length")
@click.option("--count", "-n", default=5, show_default=True,
              type=click.IntRange(MIN_COUNT, MAX_COUNT), help="Number of passwords")
@click.option("--lower/--no-lower", default=True, help="Include lowercase letters")
@click.option("--upper/--no-upper", default=True, help="Include uppercase letters")
@click.option("--digits/--no-digits", default=True, help="Include digits")
@click.option("--symbols/--no-symbols", default=True, help="Include symbols")
@click.option("--no-ambiguous", "exclude_ambiguous", is_flag=True,
              help="Exclude ambiguous characters (0, O, o, 1, l, I)")
@click.option("--ensure-all/--no-ensure-all", default=True,
              help="Include at least one character of every selected class")
@click.option("--copy", "-c", is_flag=True, help="Copy the first password to the clipboard")
@click.option("--copy-all", is_flag=True, help="Copy all passwords to the clipboard, one per line")
@click.option("--review", "-r", is_flag=True, help="Pick the password to copy interactively")
@click.option("--clear-after", default=0, show_default=True, type=click.IntRange(0, 3600),
              help="Wait and clear the clipboard after this many seconds (0 keeps it)")
def generate(length: int, count: int, lower: bool, upper: bool, digits: bool, symbols: bool,
             exclude_ambiguous: bool, ensure_all: bool, copy: bool, copy_all: bool,
             review: bool, clear_after: int) -> None:
    """Generate a batch of passwords."""
    if sum([copy, copy_all, review]) > 1:
        click.echo("Error: Use only one of --copy, --copy-all and --review", err=True)
        sys.exit(1)

    try:
        options = GenerationOptions.from_flags(
            length=length,
            count=count,
            lower=lower,
            upper=upper,
            digits=digits,
            symbols=symbols,
            exclude_ambiguous=exclude_ambiguous,
            ensure_all_classes=ensure_all,
        )
    except InvalidOptionsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    started = time.perf_counter()
    result = generate_passwords(options)
    elapsed_ms = int((time.perf_counter() - started) * 1000)

    if not result.ok:
        click.echo(f"Error: {result.error}", err=True)
        sys.exit(1)

    passwords = result.passwords
    hint = estimate_strength(length, len(options.classes))

    click.echo(f"🔐 Generated {len(passwords)} x {length}-character passwords using: "
               f"{describe_options(options)}", err=True)
    for password in passwords:
        click.echo(password)
    click.echo(f"Strength: {hint}", err=True)
    click.echo(f"Done in ~{elapsed_ms} ms", err=True)

    if copy:
        _copy_passwords(passwords[:1], clear_after)
    elif copy_all:
        _copy_passwords(passwords, clear_after)
    elif review:
        selected: List[str] = []
        review_passwords(passwords, selected.extend, hint=hint)
        if not selected:
            click.echo("No selection made.", err=True)
            return
        _copy_passwords(selected, clear_after)


@cli.command()
@click.argument("length", type=int)
@click.argument("class_count", type=int)
def strength(length: int, class_count: int) -> None:
    """Show the strength estimate for LENGTH characters drawn from CLASS_COUNT classes."""
    click.echo(estimate_strength(length, class_count))


@cli.command()
@click.option("--no-ambiguous", "exclude_ambiguous", is_flag=True,
              help="Show alphabets without ambiguous characters")
def classes(exclude_ambiguous: bool) -> None:
    """List the character classes and their alphabets."""
    for char_class in CLASS_ORDER:
        click.echo(f"  {char_class.value:<10} {class_alphabet(char_class, exclude_ambiguous)}")


def main() -> None:
    """Main entry point for the CLI application."""
    cli(auto_envvar_prefix="PASSFORGE")


if __name__ == "__main__":
    main()
