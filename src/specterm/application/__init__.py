"""Application layer: styling, serialization, writer, walker, reporters."""
