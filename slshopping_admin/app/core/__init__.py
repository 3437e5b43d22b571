"""Cross-cutting infrastructure: settings, logging, storage, templating, errors."""
