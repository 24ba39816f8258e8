"""Export of parsed registries."""
