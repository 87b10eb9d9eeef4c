"""Sub-commands registered on the root :data:`~oasprune.app.app`."""
