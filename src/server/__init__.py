"""HTTP server for mdguide."""
