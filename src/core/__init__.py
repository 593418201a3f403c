"""
Core arithmetic, domain models and input contracts.

This package contains the foundational building blocks that are independent
of how shares are delivered (files, CLI, etc.).
"""
