"""
CourtDesk: court-case status for a small practice via a grounded generative model.
"""
