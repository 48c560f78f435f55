"""Exit codes used by the loggate CLI."""

CONFIG_EXIT_CODE = 2
