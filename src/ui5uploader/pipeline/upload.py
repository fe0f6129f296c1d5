"""Validate options, collect files and hand them to a file store."""

from ui5uploader.config import (
    AuthConfig,
    ConnectionConfig,
    FileStoreConfig,
    PackagingConfig,
    UploadOptions,
)
from ui5uploader.filestore import StoreFactory, wait_for_sync
from ui5uploader.log import get_logger
from ui5uploader.pipeline._shared import UploadResult
from ui5uploader.pipeline.discovery import FileDiscoveryError, find_files, normalize_base
from ui5uploader.pipeline.validation import validate_options
from ui5uploader.reporting import Reporter

logger = get_logger(__name__)


def build_filestore_config(options: UploadOptions) -> FileStoreConfig:
    """Map resolved options onto the file store configuration."""
    return FileStoreConfig(
        connection=ConnectionConfig(
            server=options.conn_server,
            client=options.conn_client,
            use_strict_ssl=options.conn_usestrictssl,
        ),
        auth=AuthConfig(
            user=options.conn_user,
            password=options.conn_password,
        ),
        packaging=PackagingConfig(
            language=options.abap_language.upper(),
            transport_no=options.abap_transport,
            package=options.abap_package,
            bsp_container=options.abap_bsp,
            bsp_container_text=options.abap_bsp_text,
            calc_app_index=options.calcappindex,
        ),
    )


def upload_from_options(
    options: UploadOptions,
    reporter: Reporter,
    store_factory: StoreFactory,
) -> UploadResult:
    """
    Full pipeline: validate -> find files -> sync to the file store.

    Flow:
    1. Validate the options and report all messages
    2. Expand the file pattern below the base dir
    3. Build the file store configuration
    4. Sync the files and wait for the store to report completion

    The run stops (``fatal``) on validation errors, a failing glob or an
    empty file list; the store is not created in these cases. An error
    reported by the store is printed and returned in ``upload_error`` but
    does not make the run fatal.

    Args:
        options: Fully resolved options
        reporter: Console reporter for user-facing messages
        store_factory: Creates the file store from its configuration

    Returns:
        UploadResult with the validation messages, files and outcome
    """
    logger.debug("Resolved options: %s", options.masked())

    validation = validate_options(options)
    result = UploadResult(validation=validation)

    reporter.report(validation)
    if validation.fatal:
        logger.debug("Stopping after %d validation errors", len(validation.errors))
        result.fatal = True
        return result

    base = normalize_base(options.base)
    try:
        result.files = find_files(options.base, options.files)
    except FileDiscoveryError as e:
        reporter.error("Error!", e)
        result.fatal = True
        return result

    if not result.files:
        reporter.warning("No files found. Stopping...")
        result.fatal = True
        return result

    reporter.warning(f"Found {len(result.files)} files. Starting upload...")
    logger.info("Syncing %d files from %s", len(result.files), base)

    store = store_factory(build_filestore_config(options))
    result.upload_error = wait_for_sync(store, result.files, base)
    result.uploaded = result.upload_error is None

    if result.upload_error is not None:
        reporter.error("Error!", result.upload_error)
    else:
        logger.info("File store reported success")

    return result
