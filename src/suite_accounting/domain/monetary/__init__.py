"""Monetary domain package.

This package contains the ISO 4217 `Currency` definitions and the
`CurrencyFactor` view that the accounting calculators consume.
"""
