"""Exceptions raised by the taggy operations.

Every public operation either returns its result or raises one of these.
Rejected tag inserts (a tag type the container cannot host) are not errors:
they are logged and skipped.
"""


class TaggyError(Exception):
    """Base class for all taggy failures."""


class NotFoundError(TaggyError):
    """The path does not resolve to a file that can be opened."""


class ParseError(TaggyError):
    """The file was opened but its container or tag data could not be read."""


class SaveError(TaggyError):
    """Persisting the modified tags failed.

    In-memory changes were already applied when this is raised; there is no
    rollback, so the state on disk is unknown.
    """
