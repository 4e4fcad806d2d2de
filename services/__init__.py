"""
Forge Services
==============

Microservices for the Forge B-BBEE compliance platform.

Services:
- bbbee_scoring: accounts, category submissions and B-BBEE scoring
"""

__all__ = [
    "bbbee_scoring",
]
