"""Command-line interface for the sensor record logger.

The Typer application is ``cli.app.app``; the console script calls
``cli.app.run``.
"""
