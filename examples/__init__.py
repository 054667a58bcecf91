"""
SOLID principles examples package.

This package contains demonstration scripts showing how to extend the example
classes without editing them. These are examples for learning, not tests for
verification.

Available examples:
- basic_example.py: Running the walkthrough from Python
- extension_example.py: Adding new shapes, keyboards and birds
"""
