"""Token-protected company management API."""
