"""dtracker application layer: settings, logging, inventory service and CLI."""
