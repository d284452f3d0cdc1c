"""Output formatting for reports and ServiceResults."""
