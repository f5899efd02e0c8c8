"""
Project-wide constants that are unlikely to change at runtime.
"""

UNLIMITED_SPLIT = -1  # max_split value meaning "never stop splitting"

GRIT_USAGE_STRING = (
    "grit [--version] [--help] <command> [<args>]"
)

GRIT_MORE_INFO_STRING = (
    "'grit --help' lists available subcommands.\n"
    "See 'grit <command> --help' to read about a specific subcommand."
)
