"""Interpreting agency back-office package.

Organized by feature modules (billing, jobs, facilities, interpreters,
invoices) with a thin Flask controller layer over service/repository layers.
"""
