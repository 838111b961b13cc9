from .storage_base import SnapshotStoreBase
from .memory_storage import MemorySnapshotStore
from .filesystem_storage import FileSystemSnapshotStore
from .storage_factory import create_snapshot_store
