from __future__ import annotations

import logging
import os
import sys
from typing import Any, Optional

import typer

from cinputs.constraints import NumberConstraint, StringConstraint, load_constraint
from cinputs.models.errors import ConstrainedInputError, ErrorKind
from cinputs.models.targets import NUMERIC_TARGETS, STRING_TARGETS
from cinputs.parsers import ParserFactory
from cinputs.service import InputService

LOG_LEVEL_ENV = "CINPUTS_LOG_LEVEL"

app = typer.Typer(help="Read typed, constrained values from standard input.")


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr at DEBUG or the level named in CINPUTS_LOG_LEVEL."""
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


@app.callback()
def main_callback(
    verbose: bool = typer.Option(  # noqa: B008
        False,
        "--verbose",
        "-v",
        help="Log parsing and validation details to stderr.",
    ),
) -> None:
    """Read typed, constrained values from standard input."""
    configure_logging(verbose)


def _service() -> InputService:
    # Bound at call time so test runners that swap sys.stdin are honored
    return InputService(stream=sys.stdin)


def _build_constraint(
    target: str,
    min_value: Optional[float],
    max_value: Optional[float],
    min_len: Optional[int],
    max_len: Optional[int],
    include: Optional[str],
    exclude: Optional[str],
) -> Optional[Any]:
    number_opts = {"min_value": min_value, "max_value": max_value}
    string_opts = {
        "min_len": min_len,
        "max_len": max_len,
        "include": include,
        "exclude": exclude,
    }
    number_opts = {k: v for k, v in number_opts.items() if v is not None}
    string_opts = {k: v for k, v in string_opts.items() if v is not None}

    if number_opts and string_opts:
        raise typer.BadParameter("Number options and string options cannot be combined.")
    if number_opts:
        if target not in NUMERIC_TARGETS:
            raise typer.BadParameter(
                f"--min-value/--max-value need a numeric target, not {target}."
            )
        return load_constraint({"kind": "number", **number_opts})
    if string_opts:
        if target not in STRING_TARGETS:
            raise typer.BadParameter(
                f"--min-len/--max-len/--include/--exclude need a string target, not {target}."
            )
        return load_constraint({"kind": "string", **string_opts})
    return None


@app.command()
def read(
    target: str = typer.Argument(..., help="Target type name (see `cinputs types`)."),  # noqa: B008
    min_value: Optional[float] = typer.Option(  # noqa: B008
        None, "--min-value", help="Inclusive minimum."
    ),
    max_value: Optional[float] = typer.Option(  # noqa: B008
        None, "--max-value", help="Inclusive maximum."
    ),
    min_len: Optional[int] = typer.Option(  # noqa: B008
        None, "--min-len", help="Minimum length in characters."
    ),
    max_len: Optional[int] = typer.Option(  # noqa: B008
        None, "--max-len", help="Maximum length in characters."
    ),
    include: Optional[str] = typer.Option(  # noqa: B008
        None, "--include", help="Characters the value must contain."
    ),
    exclude: Optional[str] = typer.Option(  # noqa: B008
        None, "--exclude", help="Characters the value must not contain."
    ),
) -> None:
    """Read one line from stdin, parse it as TARGET and print the value."""
    if target not in ParserFactory.available_types():
        raise typer.BadParameter(
            f"Unknown target {target!r}. Run `cinputs types` to list targets.",
            param_hint="TARGET",
        )

    try:
        constraint = _build_constraint(
            target, min_value, max_value, min_len, max_len, include, exclude
        )
    except ValueError as exc:
        # pydantic.ValidationError for inconsistent bounds
        raise typer.BadParameter(str(exc)) from exc

    try:
        value = _service().read(target, constraint)
    except ConstrainedInputError as err:
        typer.echo(str(err), err=True)
        raise typer.Exit(code=1) from err

    typer.echo(value)


@app.command()
def types() -> None:
    """List the registered target type names."""
    for name in ParserFactory.available_types():
        typer.echo(name)


@app.command()
def demo() -> None:
    """Prompt for a favorite integer, an age, and a name containing J."""
    service = _service()

    typer.echo("What is your favorite integer?")
    try:
        favorite_integer = service.read("isize")
    except ConstrainedInputError as err:
        typer.echo(str(err), err=True)
        raise typer.Exit(code=1) from err
    typer.echo(f"Great Choice! {favorite_integer}")

    typer.echo("What is your age?")
    try:
        age = service.read("u8", NumberConstraint(min_value=0, max_value=120))
    except ConstrainedInputError as err:
        if err.kind is ErrorKind.VALIDATION:
            typer.echo("That's not possible.")
        else:
            typer.echo(str(err), err=True)
    else:
        typer.echo(f"You really don't look {age}.")

    typer.echo("What is the best name that contains a J?")
    try:
        name = service.read(str, StringConstraint(include="J"))
    except ConstrainedInputError as err:
        if err.kind is ErrorKind.VALIDATION:
            typer.echo("How did you fail to think of a name containing J!?")
        else:
            typer.echo(str(err), err=True)
    else:
        typer.echo(f"Great choice of name, {name} is very nice!")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
