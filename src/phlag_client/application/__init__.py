"""Application layer – flag resolution and the shared flag cache."""
