"""Read-only restaurant blog posts."""
