"""FSML core: path parsing, ordering, navigation and reorder planning."""
