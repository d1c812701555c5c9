"""Application shell: settings, constants, exceptions, logging setup, factories."""
