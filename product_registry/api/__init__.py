"""HTTP surface for the product registry."""
