"""Application layer: result DTOs shared by the store facade and callers."""
