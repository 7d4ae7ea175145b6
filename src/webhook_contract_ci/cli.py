"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

import click

from webhook_contract_ci.change_detection import DiffReport
from webhook_contract_ci.configuration import (
    DEFAULT_CONFIG_FILENAME,
    NEXT_KINDS,
    Configuration,
    ConfigurationError,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from webhook_contract_ci.run_execution import (
    CheckRequest,
    DiffRequest,
    InferRequest,
    RunExecutionError,
    execute_check_run,
    execute_diff_run,
    execute_infer_run,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="webhook-contract-ci")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """Webhook contract CI: infer schemas, check payloads and detect breaking changes."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration with defaults and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="infer")
@click.option(
    "--in",
    "input_paths",
    required=True,
    multiple=True,
    type=click.Path(path_type=str),
    help="Payload sample JSON file; repeat to merge several samples",
)
@click.option(
    "--out",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the inferred schema JSON file to write",
)
def infer(input_paths: tuple[str, ...], output_path: str) -> None:
    """Infer a normalized JSON schema from payload samples."""
    try:
        outcome = execute_infer_run(InferRequest(input_paths=input_paths, output_path=output_path))
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"wrote schema -> {outcome.output_path}")


@cli.command(name="check")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON schema file",
)
@click.option(
    "--in",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the payload JSON file to validate",
)
@click.option("--json", "json_output", is_flag=True, default=False, help="Emit JSON output.")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON configuration file",
)
@click.pass_context
def check(
    ctx: click.Context,
    schema_path: str,
    input_path: str,
    json_output: bool,
    config_path: str | None,
) -> None:
    """Validate a payload against a schema."""
    configuration = _resolve_configuration(config_path)
    try:
        outcome = execute_check_run(CheckRequest(schema_path=schema_path, input_path=input_path))
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc

    if json_output or configuration.output.format == "json":
        errors = outcome.result.errors
        document: dict[str, Any] = {
            "ok": outcome.result.ok,
            "errors": (
                None
                if errors is None
                else [
                    {"instanceLocation": error.instance_location, "message": error.message}
                    for error in errors
                ]
            ),
            "formattedErrors": outcome.formatted_errors,
        }
        click.echo(json.dumps(document, indent=2))
    elif outcome.result.ok:
        click.echo("ok")
    else:
        click.echo("payload does not match schema:\n" + outcome.formatted_errors, err=True)

    if not outcome.result.ok:
        ctx.exit(1)


# pylint: disable=too-many-arguments
@cli.command(name="diff")
@click.option(
    "--base",
    "base_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the base (current) JSON schema file",
)
@click.option(
    "--next",
    "next_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the next payload sample or schema file",
)
@click.option(
    "--next-kind",
    "next_kind",
    required=False,
    type=click.Choice(NEXT_KINDS),
    help="Read --next as a payload sample (default) or as a schema",
)
@click.option("--json", "json_output", is_flag=True, default=False, help="Emit JSON output.")
@click.option(
    "--show-nonbreaking",
    is_flag=True,
    default=False,
    help="Also list added paths and removed optional paths.",
)
@click.option(
    "--report",
    "report_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path for an .xlsx report of every change",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON configuration file",
)
@click.pass_context
def diff(
    ctx: click.Context,
    base_path: str,
    next_path: str,
    next_kind: str | None,
    json_output: bool,
    show_nonbreaking: bool,
    report_path: str | None,
    config_path: str | None,
) -> None:
    """Detect breaking changes between a base schema and a next payload or schema."""
    configuration = _resolve_configuration(config_path)
    configured_report = configuration.output.report_path
    request = DiffRequest(
        base_path=base_path,
        next_path=next_path,
        next_kind=next_kind or configuration.diff.next_kind,
        report_path=report_path or (str(configured_report) if configured_report else None),
    )
    try:
        outcome = execute_diff_run(request)
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc

    show_nonbreaking = show_nonbreaking or configuration.diff.show_nonbreaking
    if json_output or configuration.output.format == "json":
        document: dict[str, Any] = {"ok": not outcome.report.is_breaking}
        document.update(outcome.report.to_dict(include_non_breaking=show_nonbreaking))
        click.echo(json.dumps(document, indent=2))
    else:
        _echo_diff_text(outcome.report, show_nonbreaking=show_nonbreaking)

    if outcome.report_path is not None:
        click.echo(f"wrote report -> {outcome.report_path}", err=True)
    if outcome.report.is_breaking:
        ctx.exit(1)


# pylint: enable=too-many-arguments


def _echo_diff_text(report: DiffReport, *, show_nonbreaking: bool) -> None:
    if report.is_breaking:
        click.echo("breaking webhook payload changes detected:", err=True)
        _echo_list("removed required paths", report.breaking.removed_required, err=True)
        _echo_list(
            "required became optional", report.breaking.required_became_optional, err=True
        )
        _echo_list(
            "type changed",
            [change.render() for change in report.breaking.type_changed],
            err=True,
        )
    else:
        click.echo("no breaking changes detected")

    if show_nonbreaking:
        _echo_list("added paths", report.non_breaking.added)
        _echo_list("removed optional paths", report.non_breaking.removed_optional)


def _echo_list(title: str, items: Sequence[str], *, err: bool = False) -> None:
    if not items:
        return
    click.echo(f"{title}:", err=err)
    for item in items:
        click.echo(f"- {item}", err=err)


def _resolve_configuration(config_path: str | None) -> Configuration:
    if config_path is None:
        return default_configuration()
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        result = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
