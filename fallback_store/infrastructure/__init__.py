"""Infrastructure: local record store, auth adapter, tokens and connectivity probe."""
