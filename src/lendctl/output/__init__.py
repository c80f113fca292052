"""Output layer — render action results for humans (Rich) or machines (JSON)."""
