"""Built-in plugins shipped with launchkit."""
