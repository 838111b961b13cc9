import os
import shutil

import brotli
from loguru import logger

from .. import config
from ..exceptions import SnapshotStorageError
from .storage_base import SnapshotStoreBase

LATEST_FNAME = "latest.html"
PREVIOUS_FNAME = "previous.html"


class FileSystemSnapshotStore(SnapshotStoreBase):
    """File system snapshot store, one directory per target"""

    def __init__(self, datastore_path):
        """Initialize the file system snapshot store

        Args:
            datastore_path (str): Path to the datastore, created when missing
        """
        self.datastore_path = datastore_path
        logger.info(f"Snapshot datastore path is '{self.datastore_path}'")

    def get_target_dir(self, target_uuid):
        # Must be exactly one plain path component, never the datastore itself or anything outside it
        if not target_uuid or target_uuid in ('.', '..') or os.path.basename(target_uuid) != target_uuid:
            raise SnapshotStorageError(target_uuid, "not a valid target directory name")
        return os.path.join(self.datastore_path, target_uuid)

    def ensure_data_dir_exists(self, target_uuid):
        target_dir = self.get_target_dir(target_uuid)
        if not os.path.isdir(target_dir):
            logger.debug(f"> Creating data dir {target_dir}")
            os.makedirs(target_dir, exist_ok=True)

    def _write(self, target_uuid, fname, contents):
        threshold = config.get_brotli_threshold()
        skip_brotli = config.brotli_disabled()
        data = contents.encode('utf-8')

        target_dir = self.get_target_dir(target_uuid)
        plain_path = os.path.join(target_dir, fname)
        brotli_path = f"{plain_path}.br"

        if not skip_brotli and len(data) > threshold:
            dest, stale = brotli_path, plain_path
            data = brotli.compress(data, mode=brotli.MODE_TEXT)
        else:
            dest, stale = plain_path, brotli_path

        try:
            self.ensure_data_dir_exists(target_uuid)
            # First write to a temp file, then rename it, so a crash never leaves half a snapshot
            with open(dest + ".tmp", 'wb') as f:
                f.write(data)
            # Reads prefer the .br copy, so the other variant has to go before the new one lands
            if os.path.isfile(stale):
                os.unlink(stale)
            os.replace(dest + ".tmp", dest)
        except OSError as e:
            logger.error(f"Error writing snapshot {dest} : {str(e)}")
            raise SnapshotStorageError(target_uuid, str(e)) from e

    def _read(self, target_uuid, fname):
        plain_path = os.path.join(self.get_target_dir(target_uuid), fname)
        brotli_path = f"{plain_path}.br"

        try:
            if os.path.isfile(brotli_path):
                # Brotli doesnt have a fileheader to detect it, so we rely on filename
                with open(brotli_path, 'rb') as f:
                    return brotli.decompress(f.read()).decode('utf-8')

            if os.path.isfile(plain_path):
                with open(plain_path, 'r', encoding='utf-8', errors='ignore') as f:
                    return f.read()
        except (OSError, brotli.error) as e:
            logger.error(f"Error reading snapshot {plain_path} : {str(e)}")
            raise SnapshotStorageError(target_uuid, str(e)) from e

        return None

    def get_latest_html(self, target_uuid):
        return self._read(target_uuid, LATEST_FNAME)

    def save_latest_html(self, target_uuid, contents):
        self._write(target_uuid, LATEST_FNAME, contents)

    def get_previous_html(self, target_uuid):
        return self._read(target_uuid, PREVIOUS_FNAME)

    def save_previous_html(self, target_uuid, contents):
        self._write(target_uuid, PREVIOUS_FNAME, contents)

    def delete_snapshots(self, target_uuid):
        target_dir = self.get_target_dir(target_uuid)
        if os.path.isdir(target_dir):
            logger.debug(f"Removing snapshots in {target_dir}")
            shutil.rmtree(target_dir)
