"""Domain layer: route model, exclusion policy, collaborator protocols."""
