"""Infrastructure layer - adapters for the datastore."""
