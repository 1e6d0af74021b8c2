"""Cross-cutting helpers shared by services."""
