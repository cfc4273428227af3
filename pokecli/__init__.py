"""Command-line client for the PokeAPI /pokemon endpoint."""
