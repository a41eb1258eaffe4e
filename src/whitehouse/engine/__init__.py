"""Rule engine: world model, state, parser, mechanics and handlers."""
