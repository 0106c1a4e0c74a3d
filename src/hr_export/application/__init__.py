"""Application layer – export pipeline and notifications."""
