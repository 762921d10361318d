"""Core building blocks shared by the plugin, its hosts and the CLI."""
