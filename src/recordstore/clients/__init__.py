"""Backend clients for the record store."""
