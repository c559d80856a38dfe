import logging
import sys
import typing as t

import click

import fluentdocker.scripts.version
from fluentdocker.build.builder import BuildError
from fluentdocker.dockerfile.loader import DescriptionError, load_file
from fluentdocker.utils.settings import Settings, SettingsError


Settings().load_files()


command_docs = {
    "render": "Print the Dockerfile for a YAML build description",
    "build": "Build an image from a YAML build description",
    "init": "Helper commands to initialize files (like settings)",
    "version": "Print the current version ({})".format(fluentdocker.scripts.version.version)
}


def _set_settings_file(ctx: click.Context, param: click.Parameter, value: t.Optional[str]):
    if value:
        Settings().load_file(value)
    return value


def _set_log_level(ctx: click.Context, param: click.Parameter, value: t.Optional[str]):
    if value:
        Settings()["log_level"] = value
    return value


def common_options(func):
    """ Adds the options that every command supports """
    func = click.option("--log_level", type=click.Choice(list(Settings.log_levels)), expose_value=False,
                        callback=_set_log_level, help="Logging level")(func)
    func = click.option("--settings", "settings_file", type=click.Path(exists=True), expose_value=False,
                        is_eager=True, callback=_set_settings_file, help="Additional settings file")(func)
    return func


@click.group(epilog="""
fluentdocker (version {})

Settings are loaded from the application directory (`config.yaml`)
and from `fluentdocker.yaml` in the current working directory.
""".format(fluentdocker.scripts.version.version))
def cli():
    pass


@cli.command(short_help=command_docs["render"])
@click.argument("description_file", type=click.Path(exists=True))
@click.option("--output", "-o", type=click.Path(), default=None,
              help="Write the Dockerfile to this file instead of printing it")
@common_options
def render(description_file: str, output: t.Optional[str]):
    fluentdocker__render(description_file, output)


def fluentdocker__render(description_file: str, output: t.Optional[str] = None):
    dockerfile = load_file(description_file)
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(dockerfile.render())
        logging.info("Wrote {}".format(output))
    else:
        click.echo(dockerfile.render())


@cli.command(short_help=command_docs["build"])
@click.argument("description_file", type=click.Path(exists=True))
@click.argument("context", type=click.Path(exists=True), default=".")
@click.option("--tag", "-t", required=True, help="Tag of the resulting image")
@common_options
def build(description_file: str, context: str, tag: str):
    fluentdocker__build(description_file, context, tag)


def fluentdocker__build(description_file: str, context: str, tag: str):
    load_file(description_file).build(context, tag)


@cli.group(short_help=command_docs["init"])
def init():
    pass


@init.command(short_help="Store the current settings in a YAML file")
@click.argument("file", type=click.Path(exists=False), default=Settings.config_file_name)
@common_options
def settings(file: str):
    Settings().store_into_file(file)


@cli.command(short_help=command_docs["version"])
def version():
    click.echo(fluentdocker.scripts.version.version)


def cli_with_error_catching():
    """
    Process the command line arguments and catch (some) errors.
    """
    try:
        cli()
    except BuildError as err:
        err.log()
        sys.exit(1)
    except (DescriptionError, SettingsError) as err:
        logging.error(err)
        sys.exit(1)
    except EnvironmentError as err:
        logging.error(err)
        sys.exit(1)


if __name__ == "__main__":
    # for testing purposes only
    cli()
