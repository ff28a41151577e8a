"""
Briefly - Creative Brief Generator
==================================

Turns a creative-project intake form into a structured creative brief using
deterministic templates and heuristics. No paid model is called.

Generation is metered by a per-user credit balance:
- 1 credit is debited before composition starts
- the credit is refunded if composition or persistence fails
- new accounts receive 5 credits, plus 5 more when a referral code is given
"""

__version__ = "1.0.0"
__product__ = "Briefly"
