"""File store client contract and backend lookup."""

import threading
from importlib.metadata import entry_points
from typing import Callable, Protocol

from ui5uploader.config import FileStoreConfig
from ui5uploader.log import get_logger

logger = get_logger(__name__)

ENTRY_POINT_GROUP = "ui5uploader.filestores"
DEFAULT_BACKEND = "default"

SyncCallback = Callable[[BaseException | None], None]


class FileStore(Protocol):
    """
    Client that syncs local files into a BSP container.

    Diffing, transport handling and retries are the client's business.
    ``sync_files`` may return before the upload is finished; it must call
    ``callback`` exactly once, with ``None`` on success or the error.
    """

    def __init__(self, config: FileStoreConfig) -> None: ...

    def sync_files(self, files: list[str], base: str, callback: SyncCallback) -> None: ...


StoreFactory = Callable[[FileStoreConfig], FileStore]


class FileStoreNotFoundError(LookupError):
    """Raised when no file store backend is registered under a name."""


def available_backends() -> list[str]:
    """Names of all installed file store backends."""
    return sorted(ep.name for ep in entry_points(group=ENTRY_POINT_GROUP))


def load_filestore(name: str = DEFAULT_BACKEND) -> StoreFactory:
    """
    Look up a file store backend by entry point name.

    Backends register themselves in the ``ui5uploader.filestores``
    entry point group of their distribution.

    Raises:
        FileStoreNotFoundError: If no backend has that name or it cannot be imported
    """
    matches = [ep for ep in entry_points(group=ENTRY_POINT_GROUP) if ep.name == name]
    if not matches:
        raise FileStoreNotFoundError(
            f"No file store backend named '{name}'. Available: {available_backends()}"
        )

    entry_point = matches[0]
    logger.debug("Using file store backend %s (%s)", name, entry_point.value)
    try:
        return entry_point.load()
    except (ImportError, AttributeError) as e:
        raise FileStoreNotFoundError(
            f"Cannot load file store backend '{name}' ({entry_point.value}): {e}"
        ) from e


def wait_for_sync(store: FileStore, files: list[str], base: str) -> BaseException | None:
    """
    Run ``store.sync_files`` and block until it reports completion.

    An exception raised directly by ``sync_files`` counts as the
    completion error. There is no timeout.

    Returns:
        The error passed to the callback, or None on success
    """
    done = threading.Event()
    outcome: list[BaseException | None] = []

    def on_complete(err: BaseException | None = None) -> None:
        if done.is_set():
            logger.warning("File store reported completion twice, ignoring: %s", err)
            return
        outcome.append(err)
        done.set()

    try:
        store.sync_files(files, base, on_complete)
    except Exception as e:
        logger.debug("sync_files raised %s", type(e).__name__)
        return e

    done.wait()
    return outcome[0]
