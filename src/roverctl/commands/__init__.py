"""The ``run`` and ``validate`` subcommands and the context they share."""
