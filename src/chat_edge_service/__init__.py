"""Static pages and a Workers AI chat proxy behind one FastAPI app."""
