"""Core of reckon: errors, configuration, and the expression language."""
