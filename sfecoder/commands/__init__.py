"""Click subcommands for the sfecoder CLI."""
