"""Infrastructure: trace rendering and logging setup."""
