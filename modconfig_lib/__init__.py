"""modconfig: typed, namespaced configuration for mods sharing one host process."""
