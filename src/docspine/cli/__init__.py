"""docspine command-line interface (Typer)."""
