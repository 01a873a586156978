"""External adapters for the invoice engine.

Adapter Organization:

- report/: Visitors that render an invoice tree for people to read
"""
