"""ghcolumns HTTP API layer.

This package provides the Falcon Asynchronous Server Gateway Interface
(ASGI) application exposing column filtering over HTTP.

Usage
-----
Create and run the application::

    from ghcolumns.api import create_app

    app = create_app()              # defaults from the environment
    app = create_app(dependencies)  # explicit collaborators

"""

from ghcolumns.api.app import create_app

__all__ = ["create_app"]
