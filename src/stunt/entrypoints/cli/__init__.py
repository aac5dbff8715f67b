"""The ``stunt`` command-line interface."""
