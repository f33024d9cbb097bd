"""Request pipelines that sit between controllers and services."""
