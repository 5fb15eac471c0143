"""The ``truenit`` command-line interface."""
