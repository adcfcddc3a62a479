"""Host adapters for the markpost engine."""
