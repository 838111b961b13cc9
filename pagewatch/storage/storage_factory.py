from loguru import logger

from .filesystem_storage import FileSystemSnapshotStore
from .memory_storage import MemorySnapshotStore


def create_snapshot_store(datastore_path=None):
    """Create a snapshot store

    Args:
        datastore_path (str): Directory for snapshots, None keeps them in memory

    Returns:
        SnapshotStoreBase: The snapshot store
    """
    if not datastore_path:
        logger.info("Using in-memory snapshot store")
        return MemorySnapshotStore()

    logger.info(f"Using filesystem snapshot store with path {datastore_path}")
    return FileSystemSnapshotStore(datastore_path)
