"""binkit CLI subcommands. Each module exposes run(args) -> int."""
