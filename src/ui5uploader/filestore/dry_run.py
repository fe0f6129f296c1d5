"""File store that only reports what it would upload."""

from rich.console import Console

from ui5uploader.config import FileStoreConfig
from ui5uploader.filestore.client import SyncCallback


class DryRunFileStore:
    """Print the target container and files, then complete successfully."""

    def __init__(self, config: FileStoreConfig, console: Console | None = None):
        self.config = config
        self.console = console or Console()
        self.synced: list[str] = []

    def sync_files(self, files: list[str], base: str, callback: SyncCallback) -> None:
        packaging = self.config.packaging
        server = self.config.connection.server or "<no server>"

        self.console.print(f"\n[yellow]DRY RUN - nothing is sent to {server}[/yellow]")
        self.console.print(f"  Package: {packaging.package}")
        self.console.print(f"  BSP container: {packaging.bsp_container} ({packaging.language})")
        if packaging.transport_no:
            self.console.print(f"  Transport: {packaging.transport_no}")
        self.console.print(f"  Base dir: {base}", markup=False)

        for file in files:
            self.console.print(f"  {file}", markup=False)
            self.synced.append(file)

        callback(None)
