class PageWatchException(Exception):
    """Base class for everything pagewatch raises on purpose"""


class InvalidThreshold(PageWatchException, ValueError):
    def __init__(self, threshold, msg=None):
        self.threshold = threshold
        super().__init__(msg or f"Change threshold must be an integer >= 0, got {threshold!r}")


class SnapshotStorageError(PageWatchException):
    def __init__(self, target_uuid, msg):
        self.target_uuid = target_uuid
        super().__init__(f"Snapshot storage failed for {target_uuid}: {msg}")
