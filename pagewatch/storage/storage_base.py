from abc import ABC, abstractmethod


class SnapshotStoreBase(ABC):
    """Abstract base class for snapshot storage backends

    Each tracked target keeps two markup snapshots, the most recently fetched
    one and the one from before the most recent detected change.
    """

    @abstractmethod
    def get_latest_html(self, target_uuid):
        """Get the most recently stored markup

        Args:
            target_uuid (str): Target UUID

        Returns:
            str or None: The markup or None if nothing was stored yet
        """
        pass

    @abstractmethod
    def save_latest_html(self, target_uuid, contents):
        """Store the most recently fetched markup

        Args:
            target_uuid (str): Target UUID
            contents (str): Markup to save
        """
        pass

    @abstractmethod
    def get_previous_html(self, target_uuid):
        """Get the markup from before the most recent detected change

        Args:
            target_uuid (str): Target UUID

        Returns:
            str or None: The markup or None if no change was detected yet
        """
        pass

    @abstractmethod
    def save_previous_html(self, target_uuid, contents):
        """Store the markup from before a detected change

        Args:
            target_uuid (str): Target UUID
            contents (str): Markup to save
        """
        pass

    @abstractmethod
    def delete_snapshots(self, target_uuid):
        """Remove both snapshots of a target

        Args:
            target_uuid (str): Target UUID
        """
        pass
