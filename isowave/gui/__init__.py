"""Qt user interface for isowave."""
