# Shared infrastructure: logging configuration
