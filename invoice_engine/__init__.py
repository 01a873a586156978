"""Invoice engine: split-on-partial-payment invoices and tree traversal."""
