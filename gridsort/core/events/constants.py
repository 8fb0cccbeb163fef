"""
Event Type Constants.

Standard event names published on a collection's EventChannel.

Usage:
    from gridsort.core.events import Events

    collection.events.subscribe(Events.GRID_SORT, on_grid_sort)
"""


class Events:
    """
    Standard event type constants.

    Organized by origin (header, collection, remote fetch).

    Example:
        >>> from gridsort.core.events import Events
        >>> collection.events.subscribe(Events.COLLECTION_SORT, handler)
    """

    # Header events - a column became (or stopped being) the sort key
    GRID_SORT = "grid.sort"

    # Collection events - contents or ordering changed
    COLLECTION_SORT = "collection.sort"
    COLLECTION_RESET = "collection.reset"
    COLLECTION_ADD = "collection.add"

    # Remote fetch events
    FETCH_STARTED = "fetch.started"
    FETCH_COMPLETED = "fetch.completed"
    FETCH_DISCARDED = "fetch.discarded"

