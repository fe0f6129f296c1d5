"""File store clients that perform the actual upload."""

from ui5uploader.filestore.client import (
    DEFAULT_BACKEND,
    FileStore,
    FileStoreNotFoundError,
    StoreFactory,
    SyncCallback,
    available_backends,
    load_filestore,
    wait_for_sync,
)
from ui5uploader.filestore.dry_run import DryRunFileStore

__all__ = [
    "DEFAULT_BACKEND",
    "DryRunFileStore",
    "FileStore",
    "FileStoreNotFoundError",
    "StoreFactory",
    "SyncCallback",
    "available_backends",
    "load_filestore",
    "wait_for_sync",
]
