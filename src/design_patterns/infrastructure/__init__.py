"""Infrastructure layer - technical concerns shared by the demos and CLI."""
