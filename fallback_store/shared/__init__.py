"""Shared cross-cutting helpers (logging, datetime, id generation)."""
