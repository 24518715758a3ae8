"""Output layer — renders ServiceResult for humans and machines.

Output may import from services (result types) but never the reverse.
"""
