#!/usr/bin/env python3
"""
bootstrap_params.cli.cli

Typer-based CLI that validates bootstrap and dependency options and prints
the normalized parameters.

Examples
--------
Check dependency options:

    bootstrap-params deps --exclude org.slf4j:slf4j-api --sbt-plugin \\
        com.eed3si9n:sbt-assembly:2.1.5

Check a full bootstrap run:

    bootstrap-params bootstrap --assembly -R exclude:module-info.class \\
        --intransitive org.example:app:1.0.0 -o app
"""

from __future__ import annotations

import json
import logging
import traceback
from collections.abc import Callable
from typing import Any

import typer

from bootstrap_params.errors import ParamsError
from bootstrap_params.validation import Invalid, Valid, Validated

app = typer.Typer(
    name="bootstrap-params",
    help="Validate bootstrap launcher and dependency options.",
    no_args_is_help=True,
)

EXCLUDE_HELP = "Module to exclude, ORG:NAME or ORG::NAME (repeatable)."
LOCAL_EXCLUDE_FILE_HELP = "File with one PARENT--CHILD_ORG:CHILD_NAME exclusion per line."
INTRANSITIVE_HELP = "Dependency fetched without its own dependencies (repeatable)."
SBT_PLUGIN_HELP = "sbt plugin dependency (repeatable)."

VALIDATION_EXIT_CODE = 2


# -----------------------------
# Output helpers
# -----------------------------
def _print_params_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error and return the process exit code.

    Parameters
    ----------
    exc : Exception
        Exception raised while building parameters.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _report(build: Callable[[], Validated[Any]], debug: bool) -> None:
    """Run ``build`` and print either the parameters or every error."""
    try:
        result = build()
    except ParamsError as exc:
        raise typer.Exit(code=_print_params_error(exc, debug))

    match result:
        case Valid(value=params):
            typer.echo(json.dumps(params.to_dict(), indent=2))
        case Invalid(errors=errors):
            for error in errors:
                typer.echo(f"✗ {error.message}", err=True)
            raise typer.Exit(code=VALIDATION_EXIT_CODE)


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False, "--debug", help="Show debug logs and full tracebacks on error."
    ),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug logging and error output.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("deps")
def deps_cmd(
    ctx: typer.Context,
    exclude: list[str] | None = typer.Option(None, "--exclude", "-E", help=EXCLUDE_HELP),
    local_exclude_file: str = typer.Option(
        "", "--local-exclude-file", help=LOCAL_EXCLUDE_FILE_HELP
    ),
    intransitive: list[str] | None = typer.Option(
        None, "--intransitive", help=INTRANSITIVE_HELP
    ),
    sbt_plugin: list[str] | None = typer.Option(None, "--sbt-plugin", help=SBT_PLUGIN_HELP),
    sbt_version: str = typer.Option("1.0", "--sbt-version", help="sbt version of plugins."),
    scala_version: str | None = typer.Option(
        None, "--scala-version", help="Force the Scala version."
    ),
    scala_js: bool = typer.Option(False, "--scala-js", help="Resolve Scala.js dependencies."),
    native: bool = typer.Option(False, "--native", help="Resolve Scala Native dependencies."),
) -> None:
    """Validate dependency options and print the normalized parameters."""
    debug: bool = bool(ctx.obj.get("debug", False))

    def build() -> Validated[Any]:
        from bootstrap_params.params.dependency import build_dependency_params
        from bootstrap_params.schemas import parse_dependency_options

        options = parse_dependency_options(
            {
                "exclude": exclude or [],
                "local_exclude_file": local_exclude_file,
                "intransitive": intransitive or [],
                "sbt_plugin": sbt_plugin or [],
                "sbt_version": sbt_version,
                "scala_js": scala_js,
                "native": native,
            }
        )
        return build_dependency_params(options, scala_version)

    _report(build, debug)


@app.command("bootstrap")
def bootstrap_cmd(
    ctx: typer.Context,
    output: str | None = typer.Option(
        None, "--output", "-o", help="Launcher path (default: ./bootstrap)."
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing output."),
    standalone: bool | None = typer.Option(
        None, "--standalone/--no-standalone", help="Embed the classpath JARs."
    ),
    hybrid: bool | None = typer.Option(
        None, "--hybrid/--no-hybrid", help="Embed JARs in a single class loader."
    ),
    assembly: bool | None = typer.Option(
        None, "--assembly/--no-assembly", help="Generate an assembly (fat JAR)."
    ),
    embed_files: bool = typer.Option(
        True, "--embed-files/--no-embed-files", help="Embed files from the classpath."
    ),
    java_opt: list[str] | None = typer.Option(
        None, "--java-opt", "-J", help="Java option for the launcher (repeatable)."
    ),
    bat: bool | None = typer.Option(
        None, "--bat/--no-bat", help="Also write a .bat launcher (default: on Windows)."
    ),
    assembly_rule: list[str] | None = typer.Option(
        None,
        "--assembly-rule",
        "-R",
        help="Merge rule NAME:VALUE, NAME in append, append-pattern, exclude, exclude-pattern.",
    ),
    default_assembly_rules: bool = typer.Option(
        True,
        "--default-assembly-rules/--no-default-assembly-rules",
        help="Prepend the built-in merge rules.",
    ),
    preamble: bool = typer.Option(
        True, "--preamble/--no-preamble", help="Prepend a shell preamble."
    ),
    deterministic: bool = typer.Option(
        False, "--deterministic", help="Reset entry timestamps for reproducible output."
    ),
    proguarded: bool = typer.Option(
        True, "--proguarded/--no-proguarded", help="Use the proguarded launcher."
    ),
    disable_jar_checking: bool | None = typer.Option(
        None,
        "--disable-jar-checking/--enable-jar-checking",
        help="Override the JAR checking of the launcher.",
    ),
    exclude: list[str] | None = typer.Option(None, "--exclude", "-E", help=EXCLUDE_HELP),
    local_exclude_file: str = typer.Option(
        "", "--local-exclude-file", help=LOCAL_EXCLUDE_FILE_HELP
    ),
    intransitive: list[str] | None = typer.Option(
        None, "--intransitive", help=INTRANSITIVE_HELP
    ),
    sbt_plugin: list[str] | None = typer.Option(None, "--sbt-plugin", help=SBT_PLUGIN_HELP),
    sbt_version: str = typer.Option("1.0", "--sbt-version", help="sbt version of plugins."),
    scala_version: str | None = typer.Option(
        None, "--scala-version", help="Force the Scala version."
    ),
    scala_js: bool = typer.Option(False, "--scala-js", help="Resolve Scala.js dependencies."),
    native: bool = typer.Option(
        False, "--native", help="Resolve Scala Native dependencies and build a native launcher."
    ),
) -> None:
    """Validate a bootstrap run and print the normalized parameters.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.

    Notes
    -----
    - At most one of --assembly, --standalone, --hybrid and --native may be set.
    - Errors from every option are reported together, one per line.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    def build() -> Validated[Any]:
        from bootstrap_params.params.command import build_bootstrap_command_params
        from bootstrap_params.schemas import parse_bootstrap_options, parse_dependency_options

        dependency_options = parse_dependency_options(
            {
                "exclude": exclude or [],
                "local_exclude_file": local_exclude_file,
                "intransitive": intransitive or [],
                "sbt_plugin": sbt_plugin or [],
                "sbt_version": sbt_version,
                "scala_js": scala_js,
                "native": native,
            }
        )
        bootstrap_options = parse_bootstrap_options(
            {
                "output": output,
                "force": force,
                "standalone": standalone,
                "hybrid": hybrid,
                "assembly": assembly,
                "embed_files": embed_files,
                "java_opt": java_opt or [],
                "bat": bat,
                "assembly_rule": assembly_rule or [],
                "default_assembly_rules": default_assembly_rules,
                "preamble": preamble,
                "deterministic": deterministic,
                "proguarded": proguarded,
                "disable_jar_checking": disable_jar_checking,
            }
        )
        return build_bootstrap_command_params(
            dependency_options, bootstrap_options, scala_version
        )

    _report(build, debug)


if __name__ == "__main__":
    app()
