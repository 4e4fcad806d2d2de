"""
B-BBEE Scoring Service
======================

Business accounts, B-BBEE category submissions and scorecard scoring.

Features:
- Account signup, login and business profile
- Per-category record submission with server-side summaries
- Sector scorecards (Generic, Tourism, Construction, ICT)
- Weighted score calculation, level mapping and recommendations

Port: 5000
"""

__version__ = "0.1.0"
