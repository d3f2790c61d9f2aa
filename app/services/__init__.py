"""Services package - domain algorithms between the archive clients and the store."""
