"""
Mecene - milestone escrow client for the AgentFund contract.
"""

__version__ = "0.1.0"
