"""Mission supplies inventory: record store, variant model and data file."""
