"""Feature modules for lino."""
