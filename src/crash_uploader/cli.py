"""
Crash report uploader CLI.

Command-line interface for submitting a crash report file, with form
fields, to a collection server.

Usage:
    crash-upload send minidump.dmp --url https://crash.example.com/submit -p ProductName=App
    crash-upload config
    crash-upload version
"""

from pathlib import Path

import click
from returns.pipeline import is_successful

from crash_uploader import __version__
from crash_uploader.bootstrap import load_dotenv_if_exists
from crash_uploader.config import UploaderConfig
from crash_uploader.controllers.upload_controller import UploadController
from crash_uploader.logging_config import setup_logger
from crash_uploader.models import sanitize_url


def _parse_parameters(ctx, param, values: tuple[str, ...]) -> dict[str, str]:
    parameters = {}
    for value in values:
        name, separator, field_value = value.partition("=")
        if not separator:
            raise click.BadParameter(f"Expected NAME=VALUE, got: {value}")
        parameters[name] = field_value
    return parameters


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Set logging level",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write debug logs to this file",
)
def cli(log_level: str, log_file: Path | None):
    """Crash report uploader CLI.

    Sends a file and form fields to a crash collection server as a
    multipart/form-data POST.
    """
    load_dotenv_if_exists()
    setup_logger(level=log_level.upper(), log_file=log_file)


@cli.command()
@click.argument("upload_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--url", help="Collection server URL (default: CRASH_UPLOAD_URL)")
@click.option(
    "--param",
    "-p",
    "parameters",
    multiple=True,
    callback=_parse_parameters,
    help="Form field as NAME=VALUE (repeatable)",
)
@click.option(
    "--file-part-name",
    help="Form field name of the file (default: CRASH_UPLOAD_FILE_PART_NAME)",
)
def send(
    upload_file: Path,
    url: str | None,
    parameters: dict[str, str],
    file_part_name: str | None,
):
    """
    Upload a crash report file.

    Examples:
        crash-upload send crash.dmp --url https://crash.example.com/submit -p ProductName=App
        crash-upload send crash.dmp -p Version=1.0 --file-part-name upload_file_minidump
    """
    config = UploaderConfig.from_env()
    url = url or config.url
    if not url:
        raise click.UsageError("No --url given and CRASH_UPLOAD_URL is not set")

    controller = UploadController.create_with_http_client(user_agent=config.user_agent)
    result = controller.upload(
        url=url,
        parameters=parameters,
        upload_file=upload_file,
        file_part_name=file_part_name or config.file_part_name,
    )

    if not is_successful(result):
        error = result.failure()
        raise click.ClickException(f"Upload failed ({type(error).__name__}): {error}")

    click.echo(f"✓ Uploaded {upload_file} (HTTP {result.unwrap().status_code})")


@cli.command()
def version():
    """Show crash uploader version."""
    click.echo(f"Crash Uploader v{__version__}")


@cli.command()
def config():
    """Show current configuration from environment."""
    current = UploaderConfig.from_env()

    click.echo("Current Configuration:")
    click.echo("=" * 60)
    click.echo(f"CRASH_UPLOAD_URL:            {sanitize_url(current.url) or '(not set)'}")
    click.echo(f"CRASH_UPLOAD_USER_AGENT:     {current.user_agent}")
    click.echo(f"CRASH_UPLOAD_FILE_PART_NAME: {current.file_part_name}")
    click.echo("=" * 60)

    errors = current.validate()
    if errors:
        click.echo()
        click.echo("Configuration Issues:")
        for error in errors:
            click.echo(f"  ⚠ {error}")
    else:
        click.echo()
        click.echo("✓ Configuration is valid")


if __name__ == "__main__":
    cli()  # pylint: disable=no-value-for-parameter
