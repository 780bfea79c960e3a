"""Fixed paths and configuration documents."""
