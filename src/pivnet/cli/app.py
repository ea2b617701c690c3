from typing import Optional

import typer

from .. import __version__
from .commands.auth import auth
from .commands.eulas import accept_eula, eula, eulas
from .commands.product_files import (
    add_product_file,
    delete_product_file,
    product_file,
    product_files,
    remove_product_file,
)
from .commands.products import product, products
from .commands.release_dependencies import (
    add_release_dependency,
    release_dependencies,
    remove_release_dependency,
)
from .commands.release_upgrade_paths import (
    add_release_upgrade_path,
    release_upgrade_paths,
    remove_release_upgrade_path,
)
from .commands.releases import delete_release, release, release_types, releases
from .commands.user_groups import (
    add_user_group,
    create_user_group,
    delete_user_group,
    remove_user_group,
    user_group,
    user_groups,
)
from .config import OUTPUT_FORMATS, CLIConfig, set_config
from .logging_setup import configure_logging


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


# Commands
app.command()(auth)
app.command()(products)
app.command()(product)
app.command()(releases)
app.command()(release)
app.command("delete-release")(delete_release)
app.command("release-types")(release_types)
app.command()(eulas)
app.command()(eula)
app.command("accept-eula")(accept_eula)
app.command("product-files")(product_files)
app.command("product-file")(product_file)
app.command("add-product-file")(add_product_file)
app.command("remove-product-file")(remove_product_file)
app.command("delete-product-file")(delete_product_file)
app.command("user-groups")(user_groups)
app.command("user-group")(user_group)
app.command("create-user-group")(create_user_group)
app.command("delete-user-group")(delete_user_group)
app.command("add-user-group")(add_user_group)
app.command("remove-user-group")(remove_user_group)
app.command("release-dependencies")(release_dependencies)
app.command("add-release-dependency")(add_release_dependency)
app.command("remove-release-dependency")(remove_release_dependency)
app.command("release-upgrade-paths")(release_upgrade_paths)
app.command("add-release-upgrade-path")(add_release_upgrade_path)
app.command("remove-release-upgrade-path")(remove_release_upgrade_path)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
    api_token: Optional[str] = typer.Option(
        None, "--api-token", help="API token (env: PIVNET_API_TOKEN)."
    ),
    host: Optional[str] = typer.Option(
        None, "--host", "--endpoint", help="Pivotal Network URL (env: PIVNET_HOST)."
    ),
    output_format: Optional[str] = typer.Option(
        None, "--format", help="Output format: table, json or yaml (env: PIVNET_FORMAT)."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log HTTP requests to stderr."),
    skip_ssl_validation: bool = typer.Option(
        False, "--skip-ssl-validation", help="Do not verify TLS certificates."
    ),
) -> None:
    """Command-line client for the Pivotal Network API."""
    config = CLIConfig.from_env()
    if api_token:
        config.api_token = api_token
    if host:
        config.host = host
    if output_format:
        config.output_format = output_format
    config.verbose = verbose
    config.skip_ssl_validation = skip_ssl_validation

    if config.output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"error: invalid --format '{config.output_format}', "
            f"expected one of: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    configure_logging(verbose)
    set_config(config)


def main() -> None:
    app()
