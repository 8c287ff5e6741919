"""Grid snake: tick engine, state machine and a pygame front end."""

__version__ = "0.1.0"
