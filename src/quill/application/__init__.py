"""Application layer - commands, queries and their collaborators."""
