from threading import Lock

from .storage_base import SnapshotStoreBase

LATEST = 'latest'
PREVIOUS = 'previous'


class MemorySnapshotStore(SnapshotStoreBase):
    """In-process snapshot store, nothing survives a restart"""

    def __init__(self):
        self.__snapshots = {}
        self.__lock = Lock()

    def _get(self, target_uuid, kind):
        with self.__lock:
            return self.__snapshots.get((target_uuid, kind))

    def _set(self, target_uuid, kind, contents):
        with self.__lock:
            self.__snapshots[(target_uuid, kind)] = contents

    def get_latest_html(self, target_uuid):
        return self._get(target_uuid, LATEST)

    def save_latest_html(self, target_uuid, contents):
        self._set(target_uuid, LATEST, contents)

    def get_previous_html(self, target_uuid):
        return self._get(target_uuid, PREVIOUS)

    def save_previous_html(self, target_uuid, contents):
        self._set(target_uuid, PREVIOUS, contents)

    def delete_snapshots(self, target_uuid):
        with self.__lock:
            self.__snapshots.pop((target_uuid, LATEST), None)
            self.__snapshots.pop((target_uuid, PREVIOUS), None)
