"""autolinker CLI — entry point for scan, link, settings and toggle commands."""

import click

from autolinker import __version__
from autolinker.core.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, package_name="autolinker")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    envvar="AUTOLINKER_CONFIG",
    help="Config file (YAML or JSON). Defaults to ~/.autolinker/config.yaml.",
)
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR.")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, log_level: str | None) -> None:
    """autolinker — link the words of your notes to the notes that define them."""
    from .common import configure_logging, load_config

    try:
        config = load_config(config_file)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e
    configure_logging(config, log_level)
    ctx.obj = {"config": config}


from .link_cmd import link
from .scan_cmd import scan
from .settings_cmd import settings, toggle

main.add_command(scan)
main.add_command(link)
main.add_command(settings)
main.add_command(toggle)
