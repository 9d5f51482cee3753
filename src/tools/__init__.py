"""Developer and end-user tooling."""
