"""Domain models, configuration and cross-cutting helpers."""
