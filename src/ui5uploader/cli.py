"""CLI entrypoint for the uploader."""

from functools import partial
from pathlib import Path
from typing import Annotated

import dotenv
import typer
from pydantic import ValidationError
from rich.console import Console

from ui5uploader.config import FileStoreConfig, load_options_file, resolve_options
from ui5uploader.filestore import (
    DEFAULT_BACKEND,
    DryRunFileStore,
    FileStore,
    FileStoreNotFoundError,
    load_filestore,
)
from ui5uploader.log import setup_logging
from ui5uploader.pipeline import upload_from_options
from ui5uploader.reporting import Reporter

dotenv.load_dotenv()

app = typer.Typer(
    name="ui5uploader",
    help="Upload local files into ABAP BSP containers",
    no_args_is_help=True,
)
console = Console()

ENV_PREFIX = "UI5UPLOADER_"


@app.command()
def upload(
    conn_server: Annotated[
        str | None, typer.Option("--conn_server", envvar=f"{ENV_PREFIX}CONN_SERVER", help="SAP host")
    ] = None,
    conn_user: Annotated[
        str | None, typer.Option("--conn_user", envvar=f"{ENV_PREFIX}CONN_USER", help="SAP user")
    ] = None,
    conn_password: Annotated[
        str | None,
        typer.Option("--conn_password", envvar=f"{ENV_PREFIX}CONN_PASSWORD", help="SAP password"),
    ] = None,
    conn_client: Annotated[
        str | None,
        typer.Option(
            "--conn_client",
            envvar=f"{ENV_PREFIX}CONN_CLIENT",
            help="SAP client (sent as sap-client). The default client is used if omitted.",
        ),
    ] = None,
    usestrictssl: Annotated[
        str | None,
        typer.Option(
            "--usestrictssl",
            help="Default: true. Set to false to allow self-signed certificates.",
        ),
    ] = None,
    base: Annotated[str | None, typer.Option("--base", help="Base dir")] = None,
    files: Annotated[
        str | None, typer.Option("--files", help="Files to upload (glob, relative to the base dir)")
    ] = None,
    abap_transport: Annotated[
        str | None, typer.Option("--abap_transport", help="ABAP transport no.")
    ] = None,
    abap_package: Annotated[str | None, typer.Option("--abap_package", help="ABAP package name")] = None,
    abap_bsp: Annotated[str | None, typer.Option("--abap_bsp", help="ABAP BSP container ID")] = None,
    abap_bsp_text: Annotated[
        str | None, typer.Option("--abap_bsp_text", help="ABAP BSP container name")
    ] = None,
    abap_language: Annotated[str | None, typer.Option("--abap_language", help="ABAP language")] = None,
    calcappindex: Annotated[
        str | None, typer.Option("--calcappindex", help="Re-calculate application index")
    ] = None,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="YAML file with option defaults")
    ] = None,
    filestore: Annotated[
        str, typer.Option(envvar=f"{ENV_PREFIX}FILESTORE", help="File store backend to upload with")
    ] = DEFAULT_BACKEND,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Validate and list files, don't upload")
    ] = False,
    fail_on_upload_error: Annotated[
        bool, typer.Option("--fail-on-upload-error", help="Exit with 1 if the upload reports an error")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
):
    """Upload some files to an ABAP BSP container."""
    setup_logging(verbose)
    reporter = Reporter(console)

    try:
        file_options = load_options_file(config) if config is not None else {}
        options = resolve_options(
            file_options,
            {
                "conn_server": conn_server,
                "conn_user": conn_user,
                "conn_password": conn_password,
                "conn_client": conn_client,
                "conn_usestrictssl": usestrictssl,
                "base": base,
                "files": files,
                "abap_transport": abap_transport,
                "abap_package": abap_package,
                "abap_bsp": abap_bsp,
                "abap_bsp_text": abap_bsp_text,
                "abap_language": abap_language,
                "calcappindex": calcappindex,
            },
        )
    except (OSError, ValidationError, ValueError) as e:
        reporter.error("Error!", e)
        raise typer.Exit(code=1)

    if dry_run:
        store_factory = partial(DryRunFileStore, console=console)
    else:
        store_factory = partial(_create_store, filestore)

    try:
        result = upload_from_options(options, reporter, store_factory)
    except FileStoreNotFoundError as e:
        reporter.error("Error!", e)
        raise typer.Exit(code=1)

    if result.fatal:
        raise typer.Exit(code=1)

    if result.upload_error is not None and fail_on_upload_error:
        raise typer.Exit(code=1)

    if not result.uploaded:
        return

    if dry_run:
        reporter.success(f"Dry run complete, {len(result.files)} files listed.")
    else:
        reporter.success(f"Synced {len(result.files)} files.")


def _create_store(backend: str, config: FileStoreConfig) -> FileStore:
    return load_filestore(backend)(config)


@app.command()
def version():
    """Show version information."""
    from ui5uploader import __version__

    console.print(f"ui5uploader version {__version__}")


if __name__ == "__main__":
    app()
