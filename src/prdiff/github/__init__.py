"""GitHub integration: REST client, response models, and comment rendering."""
