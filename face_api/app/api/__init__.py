"""HTTP layer of the Face Store API."""
