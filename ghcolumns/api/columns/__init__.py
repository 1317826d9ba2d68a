"""Column filtering resources.

Usage
-----
Import column resources for route registration::

    from ghcolumns.api.columns.resources import (
        ActivityColumnResource,
        NotificationColumnResource,
    )
"""
